"""Last.fm connector."""

from .config import BASE_URL, LastFMConfig

__all__ = ["BASE_URL", "LastFMConfig"]
