"""StreamingChatClient Protocol (single-class module).

Capability marker for clients that open a live stream of reply deltas.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ..cancellation import CancellationToken
from ..models import ChatRequest
from .chat_stream import ChatStream


@runtime_checkable
class StreamingChatClient(Protocol):
    """Capability for clients that stream incremental deltas.

    A failure while opening the stream is raised immediately and no cursor is
    returned. On success the caller owns the returned ``ChatStream`` and must
    close it on every exit path.
    """

    def chat_stream(self, request: ChatRequest, token: Optional[CancellationToken] = None) -> ChatStream:
        """Open a streaming chat completion and return its cursor."""
        ...
