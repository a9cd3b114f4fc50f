"""REST runtime abstractions."""

from .http_client import ErrorPayloadResponse, HTTPClient
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import RESTTransport

__all__ = [
    "ErrorPayloadResponse",
    "HTTPClient",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
