"""Configuration error raised before any network I/O is attempted."""
from __future__ import annotations

from .provider_error import ProviderError


class ConfigurationError(ProviderError):
    """A required client setting (endpoint or model identifier) is missing.

    Raised by the connection builder before the SDK client is constructed, so
    no request ever leaves the process. Never retryable.
    """


__all__ = ["ConfigurationError"]
