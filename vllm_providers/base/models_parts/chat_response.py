"""
ChatResponse DTO representing a model reply.

Returned whole by synchronous chat and once per content delta by streaming
chat, in which case ``message.content`` holds only the fragment carried by one
chunk. Accumulating deltas is the caller's job (see ``accumulate_stream``).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .message import Message
from .provider_metadata import ProviderMetadata


@dataclass
class ChatResponse:
    """Reply (or reply fragment) from an LLM chat invocation.

    Attributes:
        message: The model's message; role is ``"assistant"`` for deltas.
        meta: Execution `ProviderMetadata` for observability.
    """

    message: Message
    meta: ProviderMetadata

    @property
    def text(self) -> str:
        """Shortcut for ``message.content``."""
        return self.message.content

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        return {
            "message": self.message.to_wire(),
            "meta": self.meta.to_dict(),
        }


__all__ = [
    "ChatResponse",
]
