"""
Client capability interfaces (Protocols).

The capability set is split in three independently useful parts (basic name,
synchronous chat, streaming chat) plus the stream cursor contract. One
concrete adapter satisfies all of them structurally; no inheritance is needed.
"""

from __future__ import annotations

from .interfaces_parts import (
    ChatClient,
    ChatStream,
    LLMClient,
    StreamingChatClient,
)

__all__ = [
    "LLMClient",
    "ChatClient",
    "StreamingChatClient",
    "ChatStream",
]
