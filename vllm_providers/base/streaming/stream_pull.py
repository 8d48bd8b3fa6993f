"""Tagged result of a single stream pull.

A pull has exactly one of three successful outcomes; read failures are raised
instead of being encoded here, so every error kind stays distinguishable from
the end-of-stream signal.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models import ChatResponse


class PullOutcome(str, Enum):
    """Outcome of one ``ChatStream.recv`` call."""

    DELTA = "delta"  # a content fragment is attached
    EMPTY = "empty"  # keepalive / role-only / metadata chunk; pull again
    DONE = "done"  # end of stream; not an error


@dataclass(frozen=True)
class StreamPull:
    """Result of one pull: the outcome tag plus the delta when there is one."""

    outcome: PullOutcome
    response: Optional[ChatResponse] = None

    @property
    def is_delta(self) -> bool:
        return self.outcome is PullOutcome.DELTA

    @property
    def is_empty(self) -> bool:
        return self.outcome is PullOutcome.EMPTY

    @property
    def is_done(self) -> bool:
        return self.outcome is PullOutcome.DONE


EMPTY_PULL = StreamPull(PullOutcome.EMPTY)
DONE_PULL = StreamPull(PullOutcome.DONE)


__all__ = ["PullOutcome", "StreamPull", "EMPTY_PULL", "DONE_PULL"]
