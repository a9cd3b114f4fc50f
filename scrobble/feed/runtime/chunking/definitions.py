"""Chunking metadata definitions and policy structures.

This module defines the data structures used to describe how a "give me N
tracks" request is split into page fetches: the policy (per-request cap and
chunk size), the individual fetch requests, and the resulting plan.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...core.enums import LastFMMethod
from ...core.exceptions import ConfigurationError

# Upstream maximum number of items returned by one call
API_MAX_LIMIT = 1_000

# Maximum number of items fetched by one parallel batch. Batches of 10_000
# have been seen to work; 5_000 is the conservative default, not a
# load-tested ceiling.
CHUNK_SIZE = 5_000


@dataclass(frozen=True)
class ChunkPolicy:
    """Chunking policy for paginated endpoints.

    Attributes:
        per_request_cap: Maximum number of items per request (upstream limit)
        chunk_size: Maximum number of items fetched by one concurrent batch.
            Must be an exact multiple of ``per_request_cap`` so that page
            offsets stay whole numbers.
    """

    per_request_cap: int = API_MAX_LIMIT
    chunk_size: int = CHUNK_SIZE

    def __post_init__(self) -> None:
        """Validate chunk policy configuration."""
        if self.per_request_cap <= 0:
            raise ConfigurationError("ChunkPolicy per_request_cap must be positive")
        # Larger pages would be clamped upstream and shift every planned offset
        if self.per_request_cap > API_MAX_LIMIT:
            raise ConfigurationError(
                f"ChunkPolicy per_request_cap ({self.per_request_cap}) exceeds the "
                f"upstream maximum of {API_MAX_LIMIT} items per call"
            )
        if self.chunk_size <= 0:
            raise ConfigurationError("ChunkPolicy chunk_size must be positive")
        if self.chunk_size % self.per_request_cap != 0:
            raise ConfigurationError(
                f"ChunkPolicy chunk_size ({self.chunk_size}) must be a multiple of "
                f"per_request_cap ({self.per_request_cap})"
            )

    @property
    def max_concurrency(self) -> int:
        """Peak number of concurrent calls in one batch."""
        return self.chunk_size // self.per_request_cap


@dataclass(frozen=True)
class FetchRequest:
    """One HTTP call against a paginated method.

    Attributes:
        method: Last.fm API method
        params: Method-specific filters (from/to/extended/period)
        page: 1-based page number
        limit: Items per page
    """

    method: LastFMMethod
    params: dict[str, Any] = field(default_factory=dict, hash=False)
    page: int = 1
    limit: int = API_MAX_LIMIT

    def to_query(self) -> dict[str, Any]:
        """Endpoint parameters for this call.

        ``None`` filters are dropped. Values are passed through unchanged;
        the endpoint's ``build_query`` renders them for the wire.
        """
        query = {k: v for k, v in self.params.items() if v is not None}
        query.update(limit=self.limit, page=self.page)
        return query


@dataclass(frozen=True)
class ChunkPlan:
    """Plan for a single concurrent batch.

    Attributes:
        chunk_index: Zero-based index of this chunk in the overall plan
        requests: Fetch requests of the batch, ordered by page
        items_needed: Items this chunk is expected to contribute
    """

    chunk_index: int
    requests: list[FetchRequest]
    items_needed: int

    @property
    def pages(self) -> list[int]:
        return [r.page for r in self.requests]


@dataclass(frozen=True)
class FetchPlan:
    """Complete plan for one top-level fetch.

    Attributes:
        method: Paginated Last.fm method
        requested_limit: Limit asked for by the caller (None = everything)
        true_total: Total available upstream, learned from page 1
        effective_target: ``min(requested_limit or true_total, true_total)``
        chunks: Batches to run after page 1, in order
    """

    method: LastFMMethod
    requested_limit: int | None
    true_total: int
    effective_target: int
    chunks: list[ChunkPlan] = field(default_factory=list)

    @property
    def pages(self) -> list[int]:
        """All pages fetched after page 1, in dispatch order."""
        return [page for chunk in self.chunks for page in chunk.pages]

    @property
    def total_calls(self) -> int:
        """Number of HTTP calls including the exploratory first page."""
        return 1 + sum(len(chunk.requests) for chunk in self.chunks)


@dataclass
class ChunkResult:
    """Result of chunked execution.

    Attributes:
        data: Pages fetched after page 1, in page order
        chunks_used: Number of chunks that were executed
        calls_made: Number of HTTP calls dispatched across all chunks
        total_points: Total number of tracks across the pages
    """

    data: list[Any]
    chunks_used: int
    calls_made: int = 0
    total_points: int = 0
