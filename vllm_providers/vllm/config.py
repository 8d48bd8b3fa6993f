"""Client configuration for a vLLM (OpenAI-compatible) endpoint.

``ClientConfig`` is the immutable triple the connection builder needs:
server base URL, model identifier, and bearer credential. The API root
(``<base_url>/v1``) is derived here so every call site agrees on it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..base.dto import AdapterParams
from ..base.errors import ConfigurationError, ErrorCode
from ..config import get_provider_config
from ..config.defaults import VLLM_API_VERSION_PATH, VLLM_PROVIDER_NAME


@dataclass(frozen=True)
class ClientConfig:
    """Endpoint settings for one adapter instance.

    Attributes:
        base_url: Server root without the ``/v1`` suffix (e.g.
            ``http://localhost:8000``). A trailing slash is tolerated.
        model: Model identifier sent with every request.
        api_key: Bearer token forwarded verbatim. May be empty.
        timeout_seconds: Optional SDK request timeout. ``None`` imposes none.
        headers: Extra default headers sent with every request.
    """

    base_url: str
    model: str
    api_key: str = ""
    timeout_seconds: Optional[float] = None
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def api_root(self) -> str:
        """Return the OpenAI-compatible API root, ``<base_url>/v1``."""
        return self.base_url.rstrip("/") + VLLM_API_VERSION_PATH

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if the endpoint or model is missing."""
        missing = [name for name in ("base_url", "model") if not (getattr(self, name) or "").strip()]
        if missing:
            raise ConfigurationError(
                code=ErrorCode.CONFIGURATION,
                message=f"missing required setting(s): {', '.join(missing)}",
                provider=VLLM_PROVIDER_NAME,
                model=self.model or None,
            )

    @classmethod
    def from_provider_config(cls, **overrides: Any) -> "ClientConfig":
        """Build a config from defaults, config file, environment and ``overrides``."""
        cfg = get_provider_config(VLLM_PROVIDER_NAME, overrides)
        timeout = cfg.get("timeout_seconds")
        return cls(
            base_url=str(cfg.get("base_url") or ""),
            model=str(cfg.get("model") or ""),
            api_key=str(cfg.get("api_key") or ""),
            timeout_seconds=float(timeout) if timeout not in (None, "") else None,
            headers=dict(cfg.get("headers") or {}),
        )

    @classmethod
    def from_params(cls, params: AdapterParams) -> "ClientConfig":
        return cls(
            base_url=params.base_url,
            model=params.model,
            api_key=params.api_key,
            timeout_seconds=params.timeout_seconds,
            headers=dict(params.headers),
        )


__all__ = ["ClientConfig"]
