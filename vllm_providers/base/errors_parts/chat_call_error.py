"""Failure of the synchronous chat completion call."""
from __future__ import annotations

from .provider_error import ProviderError


class ChatCallError(ProviderError):
    """Network failure, non-success status or malformed body on ``chat``.

    The underlying SDK/transport exception is preserved in ``raw`` and chained
    as ``__cause__``.
    """


__all__ = ["ChatCallError"]
