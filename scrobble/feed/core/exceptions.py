"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .enums import LastFMErrorCode, LastFMMethod


class DataError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(DataError, ValueError):
    """Invalid client or planner configuration.

    Raised before any network call is made, e.g. when the chunk size is not
    a multiple of the per-request cap or the API key is missing.
    """

    pass


class ValidationError(DataError):
    """Data validation failure."""

    pass


class ParseError(ValidationError):
    """Upstream response did not match the expected schema."""

    def __init__(
        self,
        message: str,
        schema: str | None = None,
        method: LastFMMethod | None = None,
    ) -> None:
        super().__init__(message)
        self.schema = schema
        self.method = method


class ProviderError(DataError):
    """Error from external data provider."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class NetworkError(ProviderError):
    """Transport-level failure: connection error, timeout or non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        method: LastFMMethod | None = None,
        params: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.method = method
        self.params = dict(params or {})


class UpstreamApiError(ProviderError):
    """Last.fm returned a well-formed error payload.

    ``message`` holds the upstream text as sent; ``status_code`` is the HTTP
    status when the payload came with an error status, else None.
    """

    def __init__(
        self,
        message: str,
        code: LastFMErrorCode | int,
        status_code: int | None = None,
        method: LastFMMethod | None = None,
        upstream_message: str | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.code = code
        self.method = method
        self.message = message if upstream_message is None else upstream_message

    @property
    def error_name(self) -> str:
        """Readable name of the error code, or ``UNKNOWN``."""
        return getattr(self.code, "name", "UNKNOWN")
