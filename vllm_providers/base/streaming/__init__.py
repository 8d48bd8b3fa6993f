"""Streaming package for the adapter layer.

Exposes the pull outcome types, metrics, finalize logging and caller-side
accumulation under a single namespace.
"""

from .stream_pull import PullOutcome, StreamPull, EMPTY_PULL, DONE_PULL
from .streaming import accumulate_stream
from .streaming_metrics import StreamMetrics
from .streaming_finalize import finalize_stream

__all__ = [
    "PullOutcome",
    "StreamPull",
    "EMPTY_PULL",
    "DONE_PULL",
    "accumulate_stream",
    "StreamMetrics",
    "finalize_stream",
]
