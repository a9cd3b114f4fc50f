"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import aiohttp
import pydantic

from ...core.enums import LastFMErrorCode, LastFMMethod
from ...core.exceptions import NetworkError, ParseError, UpstreamApiError
from .http_client import ErrorPayloadResponse
from .transport import RESTTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    api_method: LastFMMethod
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None


class ResponseAdapter:
    # Name of the expected response shape, used in ParseError messages
    schema_name: str = "response"

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else None
        headers = spec.build_headers(params) if spec.build_headers else None

        logger.debug("request_sent", extra={"endpoint": spec.id, "query": query})
        try:
            data = await self._t.get(path, params=query, headers=headers)
        except aiohttp.ClientResponseError as e:
            if isinstance(e, ErrorPayloadResponse) and "error" in e.payload:
                raise _upstream_error(e.payload, spec.api_method, status_code=e.status) from e
            logger.debug("request_failed", extra={"endpoint": spec.id, "status": e.status})
            raise NetworkError(
                f"{spec.api_method.value} failed with HTTP {e.status}: {e.message}",
                status_code=e.status,
                method=spec.api_method,
                params=query,
            ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug("request_failed", extra={"endpoint": spec.id, "error": repr(e)})
            raise NetworkError(
                f"{spec.api_method.value} failed: {e!r}",
                method=spec.api_method,
                params=query,
            ) from e
        except ValueError as e:
            raise ParseError(
                f"{spec.api_method.value} returned a body that is not valid JSON",
                schema=adapter.schema_name,
                method=spec.api_method,
            ) from e

        if isinstance(data, dict) and "error" in data:
            raise _upstream_error(data, spec.api_method)

        try:
            return adapter.parse(data, params)
        except pydantic.ValidationError as e:
            raise ParseError(
                f"{spec.api_method.value} response does not match {adapter.schema_name}: "
                f"{e.error_count()} validation error(s)",
                schema=adapter.schema_name,
                method=spec.api_method,
            ) from e


def _upstream_error(
    payload: dict[str, Any], method: LastFMMethod, status_code: int | None = None
) -> UpstreamApiError:
    """Build a typed error from a ``{"error": code, "message": ...}`` payload."""
    try:
        raw_code = int(payload["error"])
    except (TypeError, ValueError):
        raw_code = -1
    code: LastFMErrorCode | int = LastFMErrorCode.from_code(raw_code) or raw_code
    name = getattr(code, "name", "UNKNOWN")
    message = str(payload.get("message", ""))
    return UpstreamApiError(
        f"{name} ({raw_code}): {message}",
        code=code,
        status_code=status_code,
        method=method,
        upstream_message=message,
    )
