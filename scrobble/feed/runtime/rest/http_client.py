"""HTTP client helper."""

from typing import Any, Dict, Optional

import aiohttp


class ErrorPayloadResponse(aiohttp.ClientResponseError):
    """Non-2xx response whose body is a JSON object.

    Carries the decoded ``payload`` next to the usual status fields so
    callers can read service-level error codes.
    """

    def __init__(self, response: aiohttp.ClientResponse, payload: Dict[str, Any]) -> None:
        super().__init__(
            response.request_info,
            response.history,
            status=response.status,
            message=str(payload.get("message", "")),
            headers=response.headers,
        )
        self.payload = payload


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(self, base_url: Optional[str] = None, timeout: float = 30.0) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        read_error_json: bool = False,
    ) -> Any:
        """GET request.

        With ``read_error_json``, a non-2xx response whose body is a JSON
        object raises ErrorPayloadResponse, which keeps both the status and
        the decoded body. Other error responses raise ClientResponseError.
        """
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"

        async with self.session.get(url, params=params, headers=headers) as response:
            if response.status < 400:
                return await response.json(content_type=None)
            if read_error_json:
                try:
                    payload = await response.json(content_type=None)
                except ValueError:
                    payload = None
                if isinstance(payload, dict):
                    raise ErrorPayloadResponse(response, payload)
            response.raise_for_status()

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
