"""LLMClient Protocol (single-class module).

Basic capability shared by every client: a display / registry name.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LLMClient(Protocol):
    """Minimal interface for language-model clients."""

    def name(self) -> str:
        """Return a display name used by registries and UIs."""
        ...
