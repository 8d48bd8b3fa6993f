"""Pytest configuration for the adapter test suite.

Resets process-wide state between tests: the pooled httpx clients, the
client registry, the cached config file, and ``VLLM_*`` environment
variables, so tests never observe each other's configuration.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from vllm_providers.base.http import close_all_clients
from vllm_providers.base.registry import ProviderRegistry
from vllm_providers.config import reset_config_cache

_ENV_VARS = (
    "VLLM_BASE_URL",
    "VLLM_MODEL",
    "VLLM_API_KEY",
    "VLLM_TIMEOUT_SECONDS",
    "VLLM_PROVIDERS_CONFIG_FILE",
    "VLLM_PROVIDERS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear env, config cache, registry and HTTP pool around every test."""

    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_config_cache()
    ProviderRegistry.clear()
    yield
    ProviderRegistry.clear()
    reset_config_cache()
    close_all_clients()
