"""Streaming metrics data structures.

Isolated within the streaming package to keep the stream adapter small.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class StreamMetrics:
    """Collected metrics for a single streaming exchange.

    Attributes:
        emitted: Number of DELTA pulls handed to the caller.
        empty: Number of EMPTY pulls (keepalive / role-only chunks).
        time_to_first_token_ms: Milliseconds from open to the first DELTA.
        total_duration_ms: Milliseconds from open to finalize.
    """

    emitted: int = 0
    empty: int = 0
    time_to_first_token_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None


__all__ = [
    "StreamMetrics",
]
