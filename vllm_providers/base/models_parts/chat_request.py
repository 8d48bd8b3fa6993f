"""
ChatRequest DTO for chat invocations.

The adapter maps this request shape to an OpenAI-compatible completion call.
Messages are forwarded exactly as given: no mutation, reordering or
truncation. An empty message list is forwarded too; the server decides whether
it is valid.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .message import Message


@dataclass
class ChatRequest:
    """Chat request sent to the adapter.

    Attributes:
        messages: Ordered list of chat `Message` instances.
        max_tokens: Optional completion token cap, forwarded only when set.
        temperature: Optional sampling temperature, forwarded only when set.
    """

    messages: List[Message] = field(default_factory=list)
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the request."""
        return {
            "messages": [m.to_wire() for m in self.messages],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }


__all__ = [
    "ChatRequest",
]
