"""
Adapter Base Package

Exports the provider-agnostic contracts, DTOs, errors, cancellation and
streaming primitives the vLLM adapter is built on:
- Interfaces: client and stream protocols
- Models (DTOs): serialization-friendly request/response objects
- Registry: named client factories
"""

from .registry import ProviderRegistry, UnknownProviderError
from .interfaces import ChatClient, ChatStream, LLMClient, StreamingChatClient
from .models import (
    ChatRequest,
    ChatResponse,
    Message,
    ProviderMetadata,
    Role,
)
from .cancellation import CancellationToken, CancelledError
from .streaming import (
    PullOutcome,
    StreamPull,
    StreamMetrics,
    accumulate_stream,
    finalize_stream,
)

__all__ = [
    # Models
    "Role",
    "Message",
    "ProviderMetadata",
    "ChatRequest",
    "ChatResponse",
    # Interfaces
    "LLMClient",
    "ChatClient",
    "StreamingChatClient",
    "ChatStream",
    # Registry
    "ProviderRegistry",
    "UnknownProviderError",
    # Cancellation
    "CancellationToken",
    "CancelledError",
    # Streaming
    "PullOutcome",
    "StreamPull",
    "StreamMetrics",
    "accumulate_stream",
    "finalize_stream",
]
