"""Structurally valid completion carrying zero choices."""
from __future__ import annotations

from .provider_error import ProviderError


class NoChoicesError(ProviderError):
    """The server answered successfully but returned no choices.

    Kept distinct from :class:`ChatCallError` so callers can decide whether an
    empty completion is a hard failure or an empty-but-successful reply.
    """


__all__ = ["NoChoicesError"]
