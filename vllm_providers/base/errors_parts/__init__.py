"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `vllm_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .configuration_error import ConfigurationError
from .chat_call_error import ChatCallError
from .stream_open_error import StreamOpenError
from .no_choices_error import NoChoicesError
from .classification import classify_exception, is_retryable

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "ChatCallError",
    "StreamOpenError",
    "NoChoicesError",
    "classify_exception",
    "is_retryable",
]
