"""REST transport binding an HTTPClient to fixed query parameters."""

from __future__ import annotations

from typing import Any

from .http_client import HTTPClient


class RESTTransport:
    """Thin wrapper around HTTPClient.

    ``default_params`` (API key, response format) are merged into every
    query; per-request values win on conflict.
    """

    def __init__(
        self,
        base_url: str,
        *,
        default_params: dict[str, Any] | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout)
        self._default_params = dict(default_params or {})

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        query = {**self._default_params, **(params or {})}
        return await self._http.get(path, params=query, headers=headers, read_error_json=True)

    async def close(self) -> None:
        await self._http.close()
