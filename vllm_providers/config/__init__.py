"""Layered configuration for the adapter.

Goals
-----
* Centralize defaults (base URL).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``VLLM_PROVIDERS_CONFIG_FILE``
    3. Environment variables (``VLLM_BASE_URL``, ``VLLM_MODEL``,
       ``VLLM_API_KEY``, ``VLLM_TIMEOUT_SECONDS``)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_provider_config(provider)``.

External Config File
--------------------
YAML is a superset of JSON, so one ``yaml.safe_load`` handles both. Example:

```
vllm:
  base_url: http://gpu-box:8000
  model: mistralai/Mistral-7B-Instruct-v0.3
  api_key: dummy
```

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import os

import yaml

from .defaults import CONFIG_FILE_ENV, VLLM_DEFAULT_BASE_URL, VLLM_PROVIDER_NAME


DEFAULTS: Dict[str, Dict[str, Any]] = {
    VLLM_PROVIDER_NAME: {"base_url": VLLM_DEFAULT_BASE_URL},
}


ENV_FIELD_MAP = {
    "base_url": "BASE_URL",
    "model": "MODEL",
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "timeout_seconds": "TIMEOUT_SECONDS",
}


_FILE_CACHE: Optional[Dict[str, Any]] = None


def _load_external_config() -> Dict[str, Any]:
    """Load (once) the optional config file named by ``VLLM_PROVIDERS_CONFIG_FILE``.

    A missing path or file yields an empty mapping. Unparseable content raises
    ``yaml.YAMLError`` so misconfiguration is not silently ignored.
    """
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    data: Any = {}
    if path and Path(path).is_file():
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the cached config file contents (re-read on next access)."""
    global _FILE_CACHE
    _FILE_CACHE = None


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is not None:
            out[field] = val
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    ``None`` override values are ignored so callers can pass optional kwargs
    straight through.
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


__all__ = [
    "get_provider_config",
    "reset_config_cache",
    "DEFAULTS",
    "ENV_FIELD_MAP",
]
