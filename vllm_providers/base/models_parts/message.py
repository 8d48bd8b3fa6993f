"""
Message DTO used by the chat adapter.

Defines the `Message` dataclass and the `Role` literal representing the sender
role. An ordered list of messages forms one conversation turn; the order is
semantically meaningful and is preserved end-to-end.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal


# Message roles understood by the inference server.
Role = Literal["system", "user", "assistant"]

ROLE_SYSTEM: Role = "system"
ROLE_USER: Role = "user"
ROLE_ASSISTANT: Role = "assistant"


@dataclass(frozen=True)
class Message:
    """A single chat message.

    Attributes:
        role: The role of the message author (``"system"``, ``"user"`` or
            ``"assistant"``).
        content: Plain text content.
    """

    role: Role
    content: str

    def to_wire(self) -> Dict[str, str]:
        """Return the OpenAI-compatible wire shape (bare role label + text)."""
        return {"role": str(self.role), "content": self.content}


__all__ = [
    "Message",
    "Role",
    "ROLE_SYSTEM",
    "ROLE_USER",
    "ROLE_ASSISTANT",
]
