"""Scrobble Feed - async Last.fm client with transparent pagination."""

from .api import LastFMClient
from .connectors.lastfm import LastFMConfig
from .core import (
    ConfigurationError,
    DataError,
    LastFMErrorCode,
    LastFMMethod,
    NetworkError,
    ParseError,
    Period,
    ProviderError,
    UpstreamApiError,
    ValidationError,
)
from .models import (
    Album,
    Artist,
    Image,
    LovedTrack,
    PageResult,
    RecentTrack,
    TopTrack,
    Track,
    TrackInfo,
)
from .runtime.chunking import ChunkPolicy

__version__ = "0.1.0"

__all__ = [
    # Client
    "LastFMClient",
    "LastFMConfig",
    "ChunkPolicy",
    # Core enums
    "LastFMMethod",
    "Period",
    "LastFMErrorCode",
    # Models
    "Album",
    "Artist",
    "Image",
    "LovedTrack",
    "PageResult",
    "RecentTrack",
    "TopTrack",
    "Track",
    "TrackInfo",
    # Exceptions
    "DataError",
    "ConfigurationError",
    "ValidationError",
    "ParseError",
    "ProviderError",
    "NetworkError",
    "UpstreamApiError",
]
