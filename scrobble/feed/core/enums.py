"""Core enumerations for the Last.fm client.

Architecture:
    This module defines the closed sets of values the client sends to or
    receives from Last.fm. String enums serialize directly into query
    parameters; the error-code enum maps the numeric ``error`` field of an
    upstream error payload to a readable name.

Key Types:
    - LastFMMethod: API methods the client is allowed to call
    - Period: Time windows accepted by ``user.getTopTracks``
    - LastFMErrorCode: Documented upstream error codes
"""

from enum import Enum, IntEnum
from typing import Optional


class LastFMMethod(str, Enum):
    """API methods supported by the client.

    Architecture:
        The value is the exact ``method`` query parameter. Paginated user
        methods carry a page/limit pair; ``track.getInfo`` is a single lookup.
    """

    RECENT_TRACKS = "user.getRecentTracks"
    LOVED_TRACKS = "user.getLovedTracks"
    TOP_TRACKS = "user.getTopTracks"
    TRACK_INFO = "track.getInfo"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value

    @property
    def is_paginated(self) -> bool:
        """Whether the method returns paged track lists."""
        return self is not LastFMMethod.TRACK_INFO


class Period(str, Enum):
    """Time windows for top tracks."""

    OVERALL = "overall"
    SEVEN_DAY = "7day"
    ONE_MONTH = "1month"
    THREE_MONTH = "3month"
    SIX_MONTH = "6month"
    TWELVE_MONTH = "12month"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, period: str) -> Optional["Period"]:
        """Get period from string value. Returns None if no match."""
        try:
            return cls(period)
        except ValueError:
            return None


class LastFMErrorCode(IntEnum):
    """Error codes documented by Last.fm.

    Codes 1 and 19 are not assigned upstream.
    """

    INVALID_SERVICE = 2
    INVALID_METHOD = 3
    AUTH_FAILED = 4
    INVALID_FORMAT = 5
    INVALID_PARAMS = 6
    INVALID_RESOURCE = 7
    OPERATION_FAILED = 8
    INVALID_SESSION_KEY = 9
    INVALID_API_KEY = 10
    SERVICE_OFFLINE = 11
    SUBSCRIBERS_ONLY = 12
    INVALID_SIGNATURE = 13
    TOKEN_UNAUTHORIZED = 14
    TOKEN_EXPIRED = 15
    TEMPORARILY_UNAVAILABLE = 16
    LOGIN_REQUIRED = 17
    TRIAL_EXPIRED = 18
    NOT_ENOUGH_CONTENT = 20
    NOT_ENOUGH_MEMBERS = 21
    NOT_ENOUGH_FANS = 22
    NOT_ENOUGH_NEIGHBOURS = 23
    NO_PEAK_RADIO = 24
    RADIO_NOT_FOUND = 25
    API_KEY_SUSPENDED = 26
    DEPRECATED = 27

    @classmethod
    def from_code(cls, code: int) -> Optional["LastFMErrorCode"]:
        """Get error code from integer value. Returns None if unknown."""
        try:
            return cls(code)
        except ValueError:
            return None
