"""ChatClient Protocol (single-class module).

Defines the synchronous chat contract.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ..cancellation import CancellationToken
from ..models import ChatRequest, ChatResponse


@runtime_checkable
class ChatClient(Protocol):
    """Capability for clients that answer a full conversation in one call.

    Implementations send ``request.messages`` as-is and return the first
    choice of the reply. Failures are raised as ``ProviderError`` subclasses;
    nothing is retried.
    """

    def chat(self, request: ChatRequest, token: Optional[CancellationToken] = None) -> ChatResponse:
        """Execute a single, non-streaming chat completion."""
        ...
