"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``vllm_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.configuration_error import ConfigurationError
from .errors_parts.chat_call_error import ChatCallError
from .errors_parts.stream_open_error import StreamOpenError
from .errors_parts.no_choices_error import NoChoicesError
from .errors_parts.classification import classify_exception, is_retryable

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
