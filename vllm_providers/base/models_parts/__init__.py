"""Model DTO parts: one class per module, re-exported by ``base.models``."""

from .message import Message, Role, ROLE_SYSTEM, ROLE_USER, ROLE_ASSISTANT
from .provider_metadata import ProviderMetadata
from .chat_request import ChatRequest
from .chat_response import ChatResponse

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
