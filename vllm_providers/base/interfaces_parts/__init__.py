"""Interfaces (Protocols) split into single-class modules.

This package provides one Protocol per file while allowing
``vllm_providers.base.interfaces`` to re-export a stable API.
"""

from .llm_client import LLMClient
from .chat_client import ChatClient
from .streaming_chat_client import StreamingChatClient
from .chat_stream import ChatStream

__all__ = [
    "LLMClient",
    "ChatClient",
    "StreamingChatClient",
    "ChatStream",
]
