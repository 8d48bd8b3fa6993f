"""Registration side-channel for vLLM-served models.

``register_model`` records a factory in :class:`ProviderRegistry` under the
model name. Hosts later build a client with ``create(name)`` without knowing
the endpoint details.
"""

from __future__ import annotations

from typing import Any

from ..base.dto import AdapterParams
from ..base.registry import ProviderRegistry
from .client import VLLMProvider
from .config import ClientConfig


def register_model(name: str, base_url: str, api_key: str = "", **params: Any) -> AdapterParams:
    """Register a factory building a :class:`VLLMProvider` for model ``name``.

    Extra keyword arguments (``timeout_seconds``, ``headers``) are validated
    through :class:`AdapterParams` now, so bad values fail at registration
    rather than on first use.

    Returns:
        The validated parameters the factory will use.
    """
    adapter_params = AdapterParams(base_url=base_url, model=name, api_key=api_key, **params)
    config = ClientConfig.from_params(adapter_params)
    ProviderRegistry.register(name, lambda: VLLMProvider(config))
    return adapter_params


__all__ = ["register_model"]
