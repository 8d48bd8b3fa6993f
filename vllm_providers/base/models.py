"""
Domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``vllm_providers.base.models_parts`` to keep a stable import path.
"""

from .models_parts.message import Message, Role, ROLE_SYSTEM, ROLE_USER, ROLE_ASSISTANT
from .models_parts.provider_metadata import ProviderMetadata
from .models_parts.chat_request import ChatRequest
from .models_parts.chat_response import ChatResponse

__all__ = [
    "Message",
    "Role",
    "ROLE_SYSTEM",
    "ROLE_USER",
    "ROLE_ASSISTANT",
    "ProviderMetadata",
    "ChatRequest",
    "ChatResponse",
]
