"""Chunk planning logic for determining page fetches.

This module provides the ChunkPlanner class that determines how to split
a "give me N tracks" request into an exploratory first page plus batches
of concurrent page fetches that respect the upstream per-request cap.
"""

from __future__ import annotations

from math import ceil
from typing import Any

from ...core.enums import LastFMMethod
from .definitions import ChunkPlan, ChunkPolicy, FetchPlan, FetchRequest
from .telemetry import log_chunk_plan


class ChunkPlanner:
    """Plans page fetches for paginated requests.

    The planner always starts with page 1, which reveals how many items
    exist upstream. Everything past page 1 is split into chunks of at most
    ``policy.chunk_size`` items; each chunk becomes a batch of page fetches
    that run concurrently.

    Page numbering:
        Call ``j`` of chunk ``i`` fetches page
        ``i * chunk_size / per_request_cap + j + 2``. The ``+ 2`` skips page 1
        (already fetched) and accounts for 1-based numbering. Since
        ``chunk_size`` is a multiple of ``per_request_cap`` (enforced by
        ChunkPolicy), pages across the plan are contiguous and never repeat.
    """

    def __init__(self, policy: ChunkPolicy | None = None) -> None:
        """Initialize chunk planner.

        Args:
            policy: Chunking policy (defaults to 1000 items per call, 5000 per chunk)
        """
        self._policy = policy or ChunkPolicy()

    @property
    def policy(self) -> ChunkPolicy:
        return self._policy

    def effective_target(self, requested_limit: int | None, true_total: int) -> int:
        """Number of items the caller will receive.

        Args:
            requested_limit: Limit asked for by the caller (None = everything)
            true_total: Total available upstream

        Returns:
            ``min(requested_limit or true_total, true_total)``, never negative
        """
        target = true_total if requested_limit is None else requested_limit
        return max(0, min(target, true_total))

    def first_request(
        self,
        *,
        method: LastFMMethod,
        params: dict[str, Any] | None = None,
        requested_limit: int | None = None,
    ) -> FetchRequest:
        """Build the exploratory page-1 request.

        Args:
            method: Paginated Last.fm method
            params: Method-specific filters
            requested_limit: Limit asked for by the caller (None = everything)

        Returns:
            FetchRequest for page 1 with ``min(requested_limit, cap)`` items

        Raises:
            ValueError: If requested_limit is not positive
        """
        if requested_limit is not None and requested_limit <= 0:
            raise ValueError("requested_limit must be positive to plan a fetch")

        cap = self._policy.per_request_cap
        limit = cap if requested_limit is None else min(requested_limit, cap)
        return FetchRequest(method=method, params=dict(params or {}), page=1, limit=limit)

    def plan(
        self,
        *,
        method: LastFMMethod,
        params: dict[str, Any] | None = None,
        requested_limit: int | None = None,
        true_total: int,
    ) -> FetchPlan:
        """Plan the fetches that follow page 1.

        Args:
            method: Paginated Last.fm method
            params: Method-specific filters, copied into every request
            requested_limit: Limit asked for by the caller (None = everything)
            true_total: Total available upstream, as reported by page 1

        Returns:
            FetchPlan whose chunks list the remaining page fetches in order
        """
        cap = self._policy.per_request_cap
        chunk_size = self._policy.chunk_size
        target = self.effective_target(requested_limit, true_total)
        remaining = target - cap

        chunks: list[ChunkPlan] = []
        if remaining > 0:
            for i in range(ceil(remaining / chunk_size)):
                needed = min(chunk_size, remaining - i * chunk_size)
                first_page = (i * chunk_size) // cap + 2
                requests = [
                    FetchRequest(
                        method=method,
                        params=dict(params or {}),
                        page=first_page + j,
                        limit=cap,
                    )
                    for j in range(ceil(needed / cap))
                ]
                chunks.append(ChunkPlan(chunk_index=i, requests=requests, items_needed=needed))

        fetch_plan = FetchPlan(
            method=method,
            requested_limit=requested_limit,
            true_total=true_total,
            effective_target=target,
            chunks=chunks,
        )

        log_chunk_plan(
            method=method.value,
            total_chunks=len(chunks),
            total_calls=fetch_plan.total_calls,
            total_limit=requested_limit,
            true_total=true_total,
        )

        return fetch_plan
