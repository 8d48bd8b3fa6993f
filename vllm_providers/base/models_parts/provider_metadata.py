"""
Provider call metadata model.

Encapsulates diagnostic metadata for a chat call (response identifier, finish
reason, latency). Attached to every ``ChatResponse`` to support observability.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional


@dataclass
class ProviderMetadata:
    """Execution metadata for a provider call.

    Attributes:
        provider_name: Canonical provider key (``"vllm"``).
        model_name: Model identifier the request was issued with.
        response_id: Server-assigned completion identifier when available.
        finish_reason: Finish reason reported for the first choice, if any.
        latency_ms: Round-trip latency for synchronous calls, in milliseconds.
        extra: Opaque, JSON-serializable map for adapter-specific diagnostics.
    """

    provider_name: str
    model_name: str
    response_id: Optional[str] = None
    finish_reason: Optional[str] = None
    latency_ms: Optional[float] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the metadata fields."""
        return asdict(self)


__all__ = [
    "ProviderMetadata",
]
