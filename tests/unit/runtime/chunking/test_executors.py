"""Unit tests for chunk execution logic."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime

import pytest

from scrobble.feed.core import LastFMMethod, NetworkError
from scrobble.feed.models import Artist, PageResult, RecentTrack
from scrobble.feed.runtime.chunking import (
    ChunkExecutor,
    ChunkPlanner,
    ChunkPolicy,
    FetchRequest,
    merge_pages,
)

RECENT = LastFMMethod.RECENT_TRACKS


def _track(i: int, *, now_playing: bool = False) -> RecentTrack:
    return RecentTrack(
        name=f"Track {i}",
        url=f"https://www.last.fm/music/A/_/Track+{i}",
        artist=Artist(name="A"),
        played_at=None if now_playing else datetime.fromtimestamp(1_700_000_000 - i, UTC),
        now_playing=now_playing,
    )


def _page(page: int, per_page: int, total: int, *, now_playing: bool = False) -> PageResult:
    start = (page - 1) * per_page
    tracks = [_track(i) for i in range(start, min(start + per_page, total))]
    if now_playing:
        tracks.insert(0, _track(-1, now_playing=True))
    return PageResult(
        tracks=tracks,
        page=page,
        per_page=per_page,
        total=total,
        total_pages=-(-total // per_page),
    )


class TestChunkExecutor:
    """Test ChunkExecutor functionality."""

    @pytest.mark.asyncio
    async def test_execute_batch_preserves_request_order(self):
        """Results follow request order even when later pages finish first."""
        executor = ChunkExecutor()
        finished: list[int] = []

        async def fetch(request: FetchRequest) -> PageResult:
            await asyncio.sleep(0.01 / request.page)
            finished.append(request.page)
            return _page(request.page, 10, 100)

        requests = [FetchRequest(method=RECENT, page=p, limit=10) for p in (2, 3, 4, 5)]
        pages = await executor.execute_batch(requests, fetch)

        assert [p.page for p in pages] == [2, 3, 4, 5]
        assert finished == [5, 4, 3, 2]

    @pytest.mark.asyncio
    async def test_execute_batch_runs_concurrently(self):
        executor = ChunkExecutor()
        in_flight = 0
        peak = 0

        async def fetch(request: FetchRequest) -> PageResult:
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return _page(request.page, 10, 100)

        requests = [FetchRequest(method=RECENT, page=p, limit=10) for p in range(2, 7)]
        await executor.execute_batch(requests, fetch)

        assert peak == 5

    @pytest.mark.asyncio
    async def test_execute_batch_fail_fast_cancels_siblings(self):
        """A failing page cancels the still-running pages of its batch."""
        executor = ChunkExecutor()
        cancelled: list[int] = []

        async def fetch(request: FetchRequest) -> PageResult:
            if request.page == 2:
                raise NetworkError("boom", status_code=500, method=RECENT)
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.append(request.page)
                raise
            return _page(request.page, 10, 100)

        requests = [FetchRequest(method=RECENT, page=p, limit=10) for p in (2, 3, 4)]
        with pytest.raises(NetworkError, match="boom"):
            await executor.execute_batch(requests, fetch)

        assert sorted(cancelled) == [3, 4]

    @pytest.mark.asyncio
    async def test_execute_runs_chunks_sequentially(self):
        """A chunk starts only after the previous chunk has fully finished."""
        planner = ChunkPlanner(ChunkPolicy(per_request_cap=10, chunk_size=20))
        plan = planner.plan(method=RECENT, requested_limit=55, true_total=100)
        executor = ChunkExecutor()
        events: list[tuple[str, int]] = []

        async def fetch(request: FetchRequest) -> PageResult:
            events.append(("start", request.page))
            await asyncio.sleep(0.001)
            events.append(("end", request.page))
            return _page(request.page, 10, 100)

        result = await executor.execute(plan=plan, fetch=fetch)

        assert [p.page for p in result.data] == [2, 3, 4, 5, 6]
        assert result.chunks_used == 3
        assert result.calls_made == 5
        assert result.total_points == 50
        # Chunk 0 = pages 2, 3; chunk 1 = pages 4, 5; chunk 2 = page 6
        assert events.index(("end", 3)) < events.index(("start", 4))
        assert events.index(("end", 5)) < events.index(("start", 6))

    @pytest.mark.asyncio
    async def test_execute_stops_after_failed_chunk(self):
        planner = ChunkPlanner(ChunkPolicy(per_request_cap=10, chunk_size=20))
        plan = planner.plan(method=RECENT, requested_limit=55, true_total=100)
        executor = ChunkExecutor()
        seen: list[int] = []

        async def fetch(request: FetchRequest) -> PageResult:
            seen.append(request.page)
            if request.page == 4:
                raise NetworkError("page 4 failed", method=RECENT)
            return _page(request.page, 10, 100)

        with pytest.raises(NetworkError):
            await executor.execute(plan=plan, fetch=fetch)

        assert 6 not in seen

    @pytest.mark.asyncio
    async def test_execute_empty_plan(self):
        plan = ChunkPlanner().plan(method=RECENT, requested_limit=10, true_total=10)

        async def fetch(request: FetchRequest) -> PageResult:
            raise AssertionError("no fetch expected")

        result = await ChunkExecutor().execute(plan=plan, fetch=fetch)

        assert result.data == []
        assert result.chunks_used == 0
        assert result.calls_made == 0


class TestMergePages:
    """Test merge_pages concatenation and truncation."""

    def test_merge_truncates_to_target(self):
        first = _page(1, 10, 100)
        rest = [_page(2, 10, 100), _page(3, 10, 100)]

        merged = merge_pages(first, rest, 25)

        assert len(merged) == 25
        assert [t.name for t in merged] == [f"Track {i}" for i in range(25)]

    def test_merge_drops_now_playing_row(self):
        first = _page(1, 10, 30, now_playing=True)
        rest = [_page(2, 10, 30)]

        merged = merge_pages(first, rest, 20)

        assert len(merged) == 20
        assert not any(t.now_playing for t in merged)
        assert merged[0].name == "Track 0"

    def test_merge_short_upstream(self):
        """Fewer items than the target returns what exists."""
        merged = merge_pages(_page(1, 10, 7), [], 10)
        assert len(merged) == 7

    def test_merge_zero_target(self):
        assert merge_pages(_page(1, 10, 7), [], 0) == []
