"""Data models for Last.fm track data.

Architecture:
    This module exports the Pydantic v2 domain models returned to callers.
    All models are immutable (frozen=True); raw upstream shapes live in
    ``connectors.lastfm.rest.schemas`` and are converted by the endpoint
    adapters.

Model Categories:
    - Tracks: LovedTrack, RecentTrack, TopTrack (tagged union ``Track``)
    - Pagination: PageResult
    - Lookups: TrackInfo
    - Shared: Artist, Album, Image
"""

from .common import Album, Artist, Image
from .page import PageResult
from .track import BaseTrack, LovedTrack, RecentTrack, TopTrack, Track
from .track_info import TrackInfo

__all__ = [
    "Album",
    "Artist",
    "BaseTrack",
    "Image",
    "LovedTrack",
    "PageResult",
    "RecentTrack",
    "TopTrack",
    "Track",
    "TrackInfo",
]
