"""vLLM (OpenAI-compatible) chat adapter."""

from .config import ClientConfig
from .client import VLLMProvider
from .stream import VLLMChatStream
from .register import register_model

__all__ = ["ClientConfig", "VLLMProvider", "VLLMChatStream", "register_model"]
