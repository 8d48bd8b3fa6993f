"""vllm_providers.config.defaults
==============================

Central place for small, stable default values. These defaults can be
overridden via environment variables, an external configuration file, or
explicit overrides, but provide sensible fallbacks for local development.

Only plain constants live here; this module must not import other package
modules.
"""

from __future__ import annotations

# Canonical provider key used for config sections, env prefixes and logs.
VLLM_PROVIDER_NAME = "vllm"

# vLLM's OpenAI-compatible server listens on port 8000 by default.
VLLM_DEFAULT_BASE_URL = "http://localhost:8000"

# Path segment of the server's OpenAI-compatibility root. Appended once to
# the configured base URL, which must not include it.
VLLM_API_VERSION_PATH = "/v1"

# Environment variable naming an optional JSON/YAML config file.
CONFIG_FILE_ENV = "VLLM_PROVIDERS_CONFIG_FILE"

# Pool discriminator for the shared httpx client.
HTTP_POOL_PURPOSE = "chat"


__all__ = [
    "VLLM_PROVIDER_NAME",
    "VLLM_DEFAULT_BASE_URL",
    "VLLM_API_VERSION_PATH",
    "CONFIG_FILE_ENV",
    "HTTP_POOL_PURPOSE",
]
