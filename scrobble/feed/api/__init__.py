"""Caller-facing API."""

from .client import LastFMClient

__all__ = ["LastFMClient"]
