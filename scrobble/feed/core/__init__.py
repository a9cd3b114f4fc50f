"""Core components."""

from .enums import LastFMErrorCode, LastFMMethod, Period
from .exceptions import (
    ConfigurationError,
    DataError,
    NetworkError,
    ParseError,
    ProviderError,
    UpstreamApiError,
    ValidationError,
)

__all__ = [
    "LastFMMethod",
    "Period",
    "LastFMErrorCode",
    "DataError",
    "ConfigurationError",
    "ValidationError",
    "ParseError",
    "ProviderError",
    "NetworkError",
    "UpstreamApiError",
]
