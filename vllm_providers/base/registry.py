"""Named client registry.

Purpose
-------
Map a string name to a zero-argument factory that produces a configured
client. Hosts use it as a side-channel to look clients up by name (for
example, the model identifier) without knowing how they are built.

External dependencies
---------------------
- Standard library only.

Timeout and fallback semantics
------------------------------
- No timeouts, retries or fallbacks. ``create`` either returns a new client
  or raises :class:`UnknownProviderError`.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, List

ClientFactory = Callable[[], Any]


class UnknownProviderError(Exception):
    """Raised when a name is not registered or its factory fails.

    Failure modes include:
    - The name was never registered (or was unregistered).
    - The registered factory raised while constructing the client.
    """


class ProviderRegistry:
    """Registry of client factories keyed by name.

    Design notes
    ------------
    - Names are stripped but case-sensitive, since they usually are model
      identifiers (``"Mistral"`` and ``"mistral"`` are distinct entries).
    - Registering an existing name replaces its factory.
    - Each ``create`` call invokes the factory, so every caller gets its own
      client instance (and therefore its own memoized SDK handle).
    """

    _FACTORIES: Dict[str, ClientFactory] = {}
    _LOCK = threading.RLock()

    @staticmethod
    def _normalize(name: str) -> str:
        return (name or "").strip()

    @classmethod
    def register(cls, name: str, factory: ClientFactory) -> None:
        """Register ``factory`` under ``name``."""
        key = cls._normalize(name)
        if not key:
            raise ValueError("registry name must be non-empty")
        if not callable(factory):
            raise TypeError(f"factory for '{name}' is not callable")
        with cls._LOCK:
            cls._FACTORIES[key] = factory

    @classmethod
    def unregister(cls, name: str) -> bool:
        """Remove ``name``; return True if it was registered."""
        with cls._LOCK:
            return cls._FACTORIES.pop(cls._normalize(name), None) is not None

    @classmethod
    def names(cls) -> List[str]:
        """Return registered names in sorted order."""
        with cls._LOCK:
            return sorted(cls._FACTORIES)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        with cls._LOCK:
            return cls._normalize(name) in cls._FACTORIES

    @classmethod
    def create(cls, name: str) -> Any:
        """Build a client through the factory registered under ``name``.

        Raises
        ------
        UnknownProviderError
            If ``name`` is unknown or the factory raised.
        """
        with cls._LOCK:
            factory = cls._FACTORIES.get(cls._normalize(name))
        if factory is None:
            raise UnknownProviderError(f"Unknown provider '{name}'")
        try:
            return factory()
        except Exception as exc:
            raise UnknownProviderError(f"Factory for '{name}' failed: {exc}") from exc

    @classmethod
    def clear(cls) -> None:
        """Drop every registration."""
        with cls._LOCK:
            cls._FACTORIES.clear()


__all__ = ["ProviderRegistry", "UnknownProviderError", "ClientFactory"]
