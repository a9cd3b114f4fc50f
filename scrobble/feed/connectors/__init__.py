"""Upstream service connectors."""
