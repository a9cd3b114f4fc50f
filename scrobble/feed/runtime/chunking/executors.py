"""Chunk execution logic for fetching and merging pages.

This module provides the ChunkExecutor class that runs a FetchPlan chunk by
chunk, dispatching every page of a chunk concurrently, and the merge step
that concatenates pages and truncates them to the requested count.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from time import perf_counter

from ...models import PageResult, Track
from .definitions import ChunkResult, FetchPlan, FetchRequest
from .telemetry import log_chunk_completed, log_chunk_error, log_chunk_execution_complete

FetchPage = Callable[[FetchRequest], Awaitable[PageResult]]


class ChunkExecutor:
    """Executes fetch plans chunk by chunk.

    Chunks run strictly one after another; the requests inside a chunk run
    concurrently. A failing request cancels its siblings and aborts the
    whole execution, so callers never see a partially merged result.
    """

    async def execute_batch(
        self,
        requests: Sequence[FetchRequest],
        fetch: FetchPage,
    ) -> list[PageResult]:
        """Fetch a batch of pages concurrently.

        Args:
            requests: Requests of one chunk, ordered by page
            fetch: Async function performing one validated fetch

        Returns:
            Pages in the same order as ``requests``, regardless of completion order

        Raises:
            Exception: The first failure among the batch; pending siblings are cancelled
        """
        tasks = [asyncio.ensure_future(fetch(request)) for request in requests]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                if not task.done():
                    task.cancel()
            # Let cancelled siblings unwind before propagating
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def execute(self, *, plan: FetchPlan, fetch: FetchPage) -> ChunkResult:
        """Execute every chunk of a plan in order.

        Args:
            plan: FetchPlan produced by ChunkPlanner
            fetch: Async function performing one validated fetch

        Returns:
            ChunkResult whose data holds the fetched pages in page order
        """
        pages: list[PageResult] = []
        calls_made = 0
        started = perf_counter()
        method = plan.method.value

        for chunk in plan.chunks:
            chunk_start = perf_counter()
            try:
                chunk_pages = await self.execute_batch(chunk.requests, fetch)
            except Exception as e:
                log_chunk_error(
                    method=method,
                    chunk_index=chunk.chunk_index,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise
            calls_made += len(chunk.requests)

            log_chunk_completed(
                method=method,
                chunk_index=chunk.chunk_index,
                pages=chunk.pages,
                rows_aggregated=sum(len(p.tracks) for p in chunk_pages),
                latency_ms=(perf_counter() - chunk_start) * 1000.0,
            )
            pages.extend(chunk_pages)

        result = ChunkResult(
            data=pages,
            chunks_used=len(plan.chunks),
            calls_made=calls_made,
            total_points=sum(len(p.tracks) for p in pages),
        )

        log_chunk_execution_complete(
            method=method,
            result=result,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )

        return result


def merge_pages(first: PageResult, pages: Sequence[PageResult], target: int) -> list[Track]:
    """Concatenate page 1 with the following pages and truncate.

    Now-playing rows are dropped so that the merged list holds scrobbles
    only, in page order.

    Args:
        first: The exploratory page-1 result
        pages: Subsequent pages in page order
        target: Effective target length

    Returns:
        New list of at most ``target`` tracks
    """
    merged: list[Track] = list(first.scrobbled)
    for page in pages:
        merged.extend(page.scrobbled)
    return merged[: max(target, 0)]
