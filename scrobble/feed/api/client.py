"""Last.fm client facade for one configured user.

The LastFMClient offers the caller-facing operations (all loved, recent and
top tracks, the currently playing track, single pages and track info) and
hides the pagination needed to go beyond the 1000-item cap of a single
Last.fm response.

Architecture:
    This module implements the Facade pattern over three collaborators:
    - RestRunner: one validated GET per call (endpoint spec + adapter)
    - ChunkPlanner: page offsets and batches after the exploratory page 1
    - ChunkExecutor: concurrent batches with fail-fast cancellation

Design Decisions:
    - Explicit client value: configuration (base URL, API key, username) is
      passed at construction; there is no process-wide instance
    - Transport injection allows testing with a mocked transport
    - Context manager pattern ensures the aiohttp session is closed
    - A limit of 0 or less returns an empty list without any network call
"""

from __future__ import annotations

import logging
from datetime import datetime
from types import ModuleType
from typing import Any

from ..connectors.lastfm.config import LastFMConfig
from ..connectors.lastfm.rest.endpoints import loved_tracks, recent_tracks, top_tracks, track_info
from ..core.enums import LastFMMethod, Period
from ..models import LovedTrack, PageResult, RecentTrack, TopTrack, TrackInfo
from ..runtime.chunking import ChunkExecutor, ChunkPlanner, FetchRequest, merge_pages
from ..runtime.rest import RESTTransport, RestRunner

logger = logging.getLogger(__name__)

_PAGED_ENDPOINTS: dict[LastFMMethod, ModuleType] = {
    LastFMMethod.LOVED_TRACKS: loved_tracks,
    LastFMMethod.RECENT_TRACKS: recent_tracks,
    LastFMMethod.TOP_TRACKS: top_tracks,
}

DEFAULT_PAGE_SIZE = 50


class LastFMClient:
    """Async Last.fm client bound to one user.

    Example:
        >>> async with LastFMClient.from_env("some_user") as client:
        ...     tracks = await client.get_all_recent_tracks(limit=2500)
        ...     playing = await client.get_currently_playing_track()
    """

    def __init__(
        self,
        config: LastFMConfig,
        *,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: API key, username, endpoint and chunking policy
            transport: Optional REST transport (created from config if not provided)
        """
        self._config = config
        self._transport = transport or RESTTransport(
            config.base_url,
            default_params=config.default_params,
            timeout=config.timeout,
        )
        self._runner = RestRunner(self._transport)
        self._planner = ChunkPlanner(config.policy)
        self._executor = ChunkExecutor()

    @classmethod
    def from_env(cls, username: str | None = None, **kwargs: Any) -> LastFMClient:
        """Create a client from ``LASTFM_API_KEY`` and ``LASTFM_USERNAME``."""
        return cls(LastFMConfig.from_env(username, **kwargs))

    @property
    def username(self) -> str:
        return self._config.username

    @property
    def config(self) -> LastFMConfig:
        return self._config

    # ------------------------------------------------------------------
    # Fetch-all operations
    # ------------------------------------------------------------------

    async def get_all_loved_tracks(self, limit: int | None = None) -> list[LovedTrack]:
        """Fetch the user's loved tracks, paginating past the per-call cap.

        Args:
            limit: Maximum number of tracks (None = all of them)
        """
        return await self._fetch_all(LastFMMethod.LOVED_TRACKS, {}, limit)

    async def get_all_recent_tracks(
        self,
        limit: int | None = None,
        *,
        from_date: datetime | int | None = None,
        to_date: datetime | int | None = None,
        extended: bool = False,
    ) -> list[RecentTrack]:
        """Fetch the user's scrobbles, newest first.

        A now-playing row is not part of the result; use
        ``get_currently_playing_track`` for it.

        Args:
            limit: Maximum number of tracks (None = all of them)
            from_date: Only scrobbles after this time (datetime or Unix seconds)
            to_date: Only scrobbles before this time (datetime or Unix seconds)
            extended: Include full artist data and the loved flag
        """
        params = {"from": from_date, "to": to_date, "extended": extended}
        return await self._fetch_all(LastFMMethod.RECENT_TRACKS, params, limit)

    async def get_all_top_tracks(
        self,
        limit: int | None = None,
        *,
        period: Period | str | None = None,
    ) -> list[TopTrack]:
        """Fetch the user's top tracks in rank order.

        Args:
            limit: Maximum number of tracks (None = all of them)
            period: Time window (default upstream: overall)

        Raises:
            ValueError: If period is not a known Period value
        """
        params = {"period": Period(period) if period is not None else None}
        return await self._fetch_all(LastFMMethod.TOP_TRACKS, params, limit)

    async def get_currently_playing_track(self) -> RecentTrack | None:
        """Return the track playing right now, or None if nothing is playing."""
        page = await self.get_recent_tracks(page=1, limit=1)
        if page.tracks and page.tracks[0].now_playing:
            return page.tracks[0]
        return None

    # ------------------------------------------------------------------
    # Single-page operations
    # ------------------------------------------------------------------

    async def get_loved_tracks(self, page: int = 1, limit: int = DEFAULT_PAGE_SIZE) -> PageResult:
        """Fetch one page of loved tracks."""
        return await self._fetch_page(
            self._page_request(LastFMMethod.LOVED_TRACKS, {}, page, limit)
        )

    async def get_recent_tracks(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        *,
        from_date: datetime | int | None = None,
        to_date: datetime | int | None = None,
        extended: bool = False,
    ) -> PageResult:
        """Fetch one page of recent tracks, including a now-playing row if any."""
        params = {"from": from_date, "to": to_date, "extended": extended}
        return await self._fetch_page(
            self._page_request(LastFMMethod.RECENT_TRACKS, params, page, limit)
        )

    async def get_top_tracks(
        self,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        *,
        period: Period | str | None = None,
    ) -> PageResult:
        """Fetch one page of top tracks."""
        params = {"period": Period(period) if period is not None else None}
        return await self._fetch_page(
            self._page_request(LastFMMethod.TOP_TRACKS, params, page, limit)
        )

    async def get_track_info(
        self,
        *,
        artist: str | None = None,
        track: str | None = None,
        mbid: str | None = None,
        autocorrect: bool = False,
    ) -> TrackInfo:
        """Look up one track, with the configured user's playcount and loved flag.

        Args:
            artist: Artist name (required unless mbid is given)
            track: Track name (required unless mbid is given)
            mbid: MusicBrainz track id
            autocorrect: Let Last.fm correct misspelled names

        Raises:
            ValueError: If neither mbid nor artist and track are given
        """
        if not mbid and not (artist and track):
            raise ValueError("get_track_info requires mbid or both artist and track")
        params = {
            "user": self._config.username,
            "artist": artist,
            "track": track,
            "mbid": mbid,
            "autocorrect": autocorrect,
        }
        return await self._runner.run(
            spec=track_info.SPEC, adapter=track_info.Adapter(), params=params
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _page_request(
        self, method: LastFMMethod, params: dict[str, Any], page: int, limit: int
    ) -> FetchRequest:
        cap = self._config.policy.per_request_cap
        if page < 1:
            raise ValueError("page must be >= 1")
        if not 1 <= limit <= cap:
            raise ValueError(f"limit must be between 1 and {cap}")
        return FetchRequest(method=method, params=params, page=page, limit=limit)

    async def _fetch_page(self, request: FetchRequest) -> PageResult:
        """Perform one validated fetch for a paginated method."""
        endpoint = _PAGED_ENDPOINTS[request.method]
        params = {"user": self._config.username, **request.to_query()}
        return await self._runner.run(spec=endpoint.SPEC, adapter=endpoint.Adapter(), params=params)

    async def _fetch_all(
        self,
        method: LastFMMethod,
        params: dict[str, Any],
        limit: int | None,
    ) -> list[Any]:
        """Fetch up to ``limit`` items of a paginated method.

        Page 1 is fetched first to learn the true total; the remaining pages
        are planned into chunks, fetched batch by batch and merged in page
        order. Any failure aborts the call; no partial list is returned.
        """
        if limit is not None and limit <= 0:
            logger.debug("fetch_all_skipped", extra={"method": method.value, "limit": limit})
            return []

        first = await self._fetch_page(
            self._planner.first_request(method=method, params=params, requested_limit=limit)
        )
        plan = self._planner.plan(
            method=method,
            params=params,
            requested_limit=limit,
            true_total=first.total,
        )
        result = await self._executor.execute(plan=plan, fetch=self._fetch_page)
        return merge_pages(first, result.data, plan.effective_target)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._transport.close()

    async def __aenter__(self) -> LastFMClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
