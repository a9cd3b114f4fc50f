"""Structured logging for chunking operations.

This module provides telemetry hooks for chunking operations, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import ChunkResult

logger = logging.getLogger(__name__)


def log_chunk_plan(
    *,
    method: str,
    total_chunks: int,
    total_calls: int,
    total_limit: int | None = None,
    true_total: int | None = None,
) -> None:
    """Log chunk plan creation.

    Args:
        method: Last.fm method being paginated
        total_chunks: Number of concurrent batches planned after page 1
        total_calls: HTTP calls including page 1
        total_limit: Total limit requested (None = everything)
        true_total: Items available upstream
    """
    logger.info(
        "chunk_plan_created",
        extra={
            "method": method,
            "total_chunks": total_chunks,
            "total_calls": total_calls,
            "total_limit": total_limit,
            "true_total": true_total,
        },
    )


def log_chunk_completed(
    *,
    method: str,
    chunk_index: int,
    pages: list[int],
    rows_aggregated: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single chunk.

    Args:
        method: Last.fm method being paginated
        chunk_index: Zero-based index of the chunk
        pages: Pages fetched by the chunk
        rows_aggregated: Number of tracks returned by the chunk
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "chunk_completed",
        extra={
            "method": method,
            "chunk_index": chunk_index,
            "pages": pages,
            "rows_aggregated": rows_aggregated,
            "latency_ms": latency_ms,
        },
    )


def log_chunk_execution_complete(
    *,
    method: str,
    result: ChunkResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of chunk execution.

    Args:
        method: Last.fm method being paginated
        result: ChunkResult from execution
        total_latency_ms: Total latency in milliseconds (optional)
    """
    logger.info(
        "chunk_execution_complete",
        extra={
            "method": method,
            "chunks_used": result.chunks_used,
            "calls_made": result.calls_made,
            "total_points": result.total_points,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_chunk_error(
    *,
    method: str,
    chunk_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log chunk execution error.

    Args:
        method: Last.fm method being paginated
        chunk_index: Zero-based index of the chunk that failed
        error_type: Type of error (e.g., "NetworkError", "ParseError")
        error_message: Error message
    """
    logger.error(
        "chunk_error",
        extra={
            "method": method,
            "chunk_index": chunk_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
