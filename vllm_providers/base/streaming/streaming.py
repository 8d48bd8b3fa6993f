"""Caller-side helpers for consuming a stream cursor.

The stream adapter never buffers; these helpers implement the accumulation the
caller is responsible for.
"""

from __future__ import annotations

from typing import List

from ..models import ChatResponse, Message, ProviderMetadata, ROLE_ASSISTANT
from .stream_pull import PullOutcome


def accumulate_stream(stream, *, provider: str = "unknown", model: str = "unknown") -> ChatResponse:
    """Drain ``stream`` until DONE and return the concatenated reply.

    EMPTY pulls are skipped. Read errors propagate unchanged. The stream is
    always closed before returning or raising.
    """
    parts: List[str] = []
    pulls = 0
    try:
        while True:
            pull = stream.recv()
            pulls += 1
            if pull.outcome is PullOutcome.DONE:
                break
            if pull.outcome is PullOutcome.DELTA and pull.response is not None:
                parts.append(pull.response.message.content)
    finally:
        stream.close()
    meta = ProviderMetadata(
        provider_name=provider,
        model_name=model,
        extra={"stream_pulls": pulls, "stream_deltas": len(parts)},
    )
    return ChatResponse(message=Message(role=ROLE_ASSISTANT, content="".join(parts)), meta=meta)


__all__ = [
    "accumulate_stream",
]
