"""Chunking layer for pagination beyond the upstream per-request cap.

This module turns "give me N tracks" into an exploratory first page plus
sequential batches of concurrent page fetches, then merges the pages in
order and truncates them to the requested count.

Architecture:
    The chunking layer consists of:
    - definitions.py: Policy and plan structures (ChunkPolicy, FetchRequest, FetchPlan)
    - planners.py: Chunk planning logic (page offsets per batch)
    - executors.py: Batch execution with fail-fast cancellation, merge/truncate
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import (
    API_MAX_LIMIT,
    CHUNK_SIZE,
    ChunkPlan,
    ChunkPolicy,
    ChunkResult,
    FetchPlan,
    FetchRequest,
)
from .executors import ChunkExecutor, merge_pages
from .planners import ChunkPlanner

__all__ = [
    "API_MAX_LIMIT",
    "CHUNK_SIZE",
    "ChunkPolicy",
    "ChunkPlan",
    "ChunkResult",
    "FetchPlan",
    "FetchRequest",
    "ChunkPlanner",
    "ChunkExecutor",
    "merge_pages",
]
