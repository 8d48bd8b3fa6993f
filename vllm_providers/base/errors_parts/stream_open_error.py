"""Failure while opening a streaming chat completion."""
from __future__ import annotations

from .provider_error import ProviderError


class StreamOpenError(ProviderError):
    """The server rejected the streaming request before any chunk was read.

    Typical causes are bad credentials, an unknown model, or the server being
    down. No stream cursor is produced when this is raised.
    """


__all__ = ["StreamOpenError"]
