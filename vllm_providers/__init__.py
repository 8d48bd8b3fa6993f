"""vllm_providers package

Chat client adapter for vLLM and other servers exposing the OpenAI-compatible
HTTP API.

Purpose:
    Provide a minimal, stable API for external consumption (packaging is
    configured via the repository root ``pyproject.toml``). Callers use client
    instances directly, for example ``VLLMProvider(config).chat(request)`` or
    ``create("my-model").chat_stream(request)`` after ``register_model``.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError` and its subclasses, :class:`ErrorCode`,
      :class:`CancelledError`
    - DTOs: :class:`Message`, :class:`ChatRequest`, :class:`ChatResponse`,
      :class:`ProviderMetadata`, :class:`StreamPull`, :class:`PullOutcome`
    - Protocols: ``LLMClient``, ``ChatClient``, ``StreamingChatClient``,
      ``ChatStream``
    - Adapter: :class:`VLLMProvider`, :class:`ClientConfig`
    - Registry: :func:`register_model`, :func:`create`, ``ProviderRegistry``
"""

from .base.errors import (
    ProviderError,
    ErrorCode,
    ConfigurationError,
    ChatCallError,
    StreamOpenError,
    NoChoicesError,
    classify_exception,
)
from .base.cancellation import CancellationToken, CancelledError
from .base.dto import AdapterParams
from .base.interfaces import ChatClient, ChatStream, LLMClient, StreamingChatClient
from .base.models import ChatRequest, ChatResponse, Message, ProviderMetadata, Role
from .base.registry import ProviderRegistry, UnknownProviderError
from .base.streaming import PullOutcome, StreamPull, accumulate_stream
from .vllm import ClientConfig, VLLMChatStream, VLLMProvider, register_model

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "ProviderError",
    "ErrorCode",
    "ConfigurationError",
    "ChatCallError",
    "StreamOpenError",
    "NoChoicesError",
    "CancelledError",
    "classify_exception",
    # DTOs
    "Role",
    "Message",
    "ChatRequest",
    "ChatResponse",
    "ProviderMetadata",
    "PullOutcome",
    "StreamPull",
    "AdapterParams",
    # Protocols
    "LLMClient",
    "ChatClient",
    "StreamingChatClient",
    "ChatStream",
    # Adapter
    "ClientConfig",
    "VLLMProvider",
    "VLLMChatStream",
    "CancellationToken",
    "accumulate_stream",
    # Registry
    "ProviderRegistry",
    "UnknownProviderError",
    "register_model",
    "create",
]


def create(name: str):
    """Build the client registered under ``name`` via ``register_model``.

    Raises
    ------
    ProviderError
        If ``name`` is not registered (``NOT_FOUND``) or its factory fails
        (classified from the factory's exception); the registry error is
        chained as the cause.
    """
    try:
        return ProviderRegistry.create(name)
    except UnknownProviderError as e:  # Wrap in unified error type
        cause = e.__cause__
        raise ProviderError(
            code=classify_exception(cause) if isinstance(cause, Exception) else ErrorCode.NOT_FOUND,
            message=f"Failed to create client '{name}': {e}",
            provider="registry",
            model=name,
        ) from e
