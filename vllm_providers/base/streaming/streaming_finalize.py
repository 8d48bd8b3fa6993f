"""Finalize stream helper.

Located within the streaming package to localize terminal logging of metrics.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from ..logging import LogContext, normalized_log_event
from .streaming_metrics import StreamMetrics


def finalize_stream(
    *,
    logger: logging.Logger,
    ctx: LogContext,
    metrics: StreamMetrics,
    event: str = "stream.end",
    error: Optional[str] = None,
    error_code: Optional[str] = None,
    **extra_fields: Any,
) -> None:
    """Emit the consolidated terminal log line for a stream.

    Called once per stream, when it reaches DONE, fails, is cancelled, or is
    closed early by the caller.
    """
    normalized_log_event(
        logger,
        event,
        ctx,
        phase="finalize",
        attempt=None,
        emitted=metrics.emitted > 0,
        tokens=None,
        error_code=error_code,
        emitted_count=metrics.emitted,
        empty_count=metrics.empty,
        time_to_first_token_ms=metrics.time_to_first_token_ms,
        total_duration_ms=metrics.total_duration_ms,
        error=error,
        **extra_fields,
    )


__all__ = ["finalize_stream"]
