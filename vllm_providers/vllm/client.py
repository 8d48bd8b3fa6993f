"""vLLM adapter over the OpenAI-compatible Chat Completions API.

Purpose:
- Implement ``ChatClient`` and ``StreamingChatClient`` against a vLLM (or any
  OpenAI-compatible) server using the ``openai`` SDK.

External dependencies:
- ``openai`` for the wire protocol (request encoding, SSE decoding, errors).
- ``httpx`` through the shared client pool, handed to the SDK.

Timeout and fallback semantics:
- No retries (``max_retries=0``) and no timeouts unless configured. Callers
  bound calls with a ``CancellationToken``.
- Every failure is raised; nothing is shaped into an error response.
"""

from __future__ import annotations

import threading
import time
from typing import Any, Optional

import httpx
from openai import OpenAI

from ..base.cancellation import CancellationToken, CancelledError, run_cancellable
from ..base.errors import (
    ChatCallError,
    ErrorCode,
    NoChoicesError,
    StreamOpenError,
    classify_exception,
    is_retryable,
)
from ..base.http import get_httpx_client
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ChatRequest, ChatResponse, Message, ProviderMetadata, ROLE_ASSISTANT
from ..config.defaults import HTTP_POOL_PURPOSE, VLLM_PROVIDER_NAME
from .config import ClientConfig
from .helpers import build_chat_params, build_messages, first_choice
from .stream import VLLMChatStream

__all__ = ["VLLMProvider"]


def _close_stream(stream: Any) -> None:
    close = getattr(stream, "close", None)
    if callable(close):
        close()


class VLLMProvider:
    """Chat client for one model on one vLLM server.

    The SDK handle is built lazily on first use and memoized; once built it is
    never rebuilt or re-validated. An SDK handle (``client``) or an
    ``httpx.Client`` may be injected, mainly for tests.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
        client: Any = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        if config is None:
            config = ClientConfig.from_provider_config(base_url=base_url, model=model, api_key=api_key)
        self._config = config
        self._sdk = client
        self._http_client = http_client
        self._build_lock = threading.Lock()
        self._logger = get_logger("vllm_providers.vllm")

    # ----- identity -----
    @property
    def provider_name(self) -> str:
        """Return the canonical provider name."""
        return VLLM_PROVIDER_NAME

    @property
    def config(self) -> ClientConfig:
        return self._config

    def name(self) -> str:
        """Return the configured model identifier."""
        return self._config.model

    def supports_streaming(self) -> bool:
        return True

    # ----- connection builder -----
    def _client(self) -> Any:
        """Return the memoized SDK handle, building it on first use.

        Raises:
            ConfigurationError: ``base_url`` or ``model`` is empty. Raised
                before any network I/O.
        """
        if self._sdk is not None:
            return self._sdk
        with self._build_lock:
            if self._sdk is not None:
                return self._sdk
            cfg = self._config
            cfg.validate()
            http_client = self._http_client or get_httpx_client(cfg.api_root, HTTP_POOL_PURPOSE)
            self._sdk = OpenAI(
                base_url=cfg.api_root,
                api_key=cfg.api_key,
                max_retries=0,
                timeout=cfg.timeout_seconds,
                http_client=http_client,
                default_headers=dict(cfg.headers) or None,
            )
            normalized_log_event(
                self._logger,
                "client.build",
                self._ctx(),
                phase="start",
                api_root=cfg.api_root,
                has_api_key=bool(cfg.api_key),
            )
            return self._sdk

    def _ctx(self) -> LogContext:
        return LogContext(provider=self.provider_name, model=self._config.model)

    # ----- chat -----
    def chat(self, request: ChatRequest, token: Optional[CancellationToken] = None) -> ChatResponse:
        """Send ``request`` and return the first choice of the completion.

        Raises:
            ConfigurationError: Missing endpoint or model.
            CancelledError: ``token`` was cancelled before or during the call.
            ChatCallError: Transport failure, non-2xx status or undecodable body.
            NoChoicesError: The server answered with zero choices.
        """
        if token is not None:
            token.raise_if_cancelled()
        client = self._client()
        model = self._config.model
        ctx = self._ctx()
        params = build_chat_params(model, build_messages(request), request, stream=False)
        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            messages=len(request.messages),
            max_tokens=request.max_tokens,
            temperature=request.temperature,
        )

        t0 = time.perf_counter()
        try:
            resp = run_cancellable(lambda: client.chat.completions.create(**params), token, reason="chat cancelled")
        except CancelledError:
            self._log_cancelled("chat.error", ctx)
            raise
        except Exception as e:
            if token is not None and token.cancelled:
                self._log_cancelled("chat.error", ctx)
                raise CancelledError(token.reason or "chat cancelled") from e
            raise self._wrap(ChatCallError, e, ctx, event="chat.error") from e
        latency_ms = (time.perf_counter() - t0) * 1000.0

        if token is not None and token.cancelled:
            self._log_cancelled("chat.error", ctx)
            raise CancelledError(token.reason or "chat cancelled")

        # Non-JSON bodies come back from the SDK as plain text.
        if isinstance(resp, (str, bytes)) or not hasattr(resp, "choices"):
            body = resp if isinstance(resp, (str, bytes)) else repr(resp)
            normalized_log_event(self._logger, "chat.error", ctx, phase="finalize", error_code=ErrorCode.VALIDATION.value)
            raise ChatCallError(
                code=ErrorCode.VALIDATION,
                message=f"malformed response body: {body[:200]!r}",
                provider=self.provider_name,
                model=model,
                raw=body,
            )

        ctx.response_id = getattr(resp, "id", None)
        choice = first_choice(resp)
        if choice is None:
            normalized_log_event(self._logger, "chat.error", ctx, phase="finalize", error_code=ErrorCode.NO_CHOICES.value)
            raise NoChoicesError(
                code=ErrorCode.NO_CHOICES,
                message="server returned no choices",
                provider=self.provider_name,
                model=model,
            )

        msg = getattr(choice, "message", None)
        usage = getattr(resp, "usage", None)
        tokens = usage.model_dump() if hasattr(usage, "model_dump") else None
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=True,
            tokens=tokens,
            latency_ms=latency_ms,
        )
        return ChatResponse(
            message=Message(
                role=getattr(msg, "role", None) or ROLE_ASSISTANT,
                content=getattr(msg, "content", None) or "",
            ),
            meta=ProviderMetadata(
                provider_name=self.provider_name,
                model_name=model,
                response_id=ctx.response_id,
                finish_reason=getattr(choice, "finish_reason", None),
                latency_ms=latency_ms,
                extra={"usage": tokens} if tokens else {},
            ),
        )

    # ----- streaming -----
    def chat_stream(self, request: ChatRequest, token: Optional[CancellationToken] = None) -> VLLMChatStream:
        """Open a streaming completion and return a cursor over it.

        Raises:
            ConfigurationError: Missing endpoint or model.
            CancelledError: ``token`` was cancelled before or while the stream
                was opening.
            StreamOpenError: The server could not be reached or rejected the
                request before any chunk arrived.
        """
        if token is not None:
            token.raise_if_cancelled()
        client = self._client()
        model = self._config.model
        ctx = self._ctx()
        params = build_chat_params(model, build_messages(request), request, stream=True)
        normalized_log_event(
            self._logger,
            "stream.start",
            ctx,
            phase="start",
            messages=len(request.messages),
            max_tokens=request.max_tokens,
            temperature=request.temperature,
        )
        try:
            raw = run_cancellable(
                lambda: client.chat.completions.create(**params),
                token,
                discard=_close_stream,
                reason="stream cancelled",
            )
        except CancelledError:
            self._log_cancelled("stream.open.error", ctx)
            raise
        except Exception as e:
            if token is not None and token.cancelled:
                self._log_cancelled("stream.open.error", ctx)
                raise CancelledError(token.reason or "stream cancelled") from e
            raise self._wrap(StreamOpenError, e, ctx, event="stream.open.error") from e

        if token is not None and token.cancelled:
            _close_stream(raw)
            self._log_cancelled("stream.open.error", ctx)
            raise CancelledError(token.reason or "stream cancelled")

        return VLLMChatStream(
            raw,
            provider=self.provider_name,
            model=model,
            logger=self._logger,
            ctx=ctx,
            token=token,
        )

    # ----- helpers -----
    def _log_cancelled(self, event: str, ctx: LogContext) -> None:
        normalized_log_event(self._logger, event, ctx, phase="finalize", error_code=ErrorCode.CANCELLED.value)

    def _wrap(self, kind, exc: Exception, ctx: LogContext, *, event: str):
        code = classify_exception(exc)
        normalized_log_event(
            self._logger,
            event,
            ctx,
            phase="start",
            error_code=code.value,
            emitted=False,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return kind(
            code=code,
            message=str(exc),
            provider=self.provider_name,
            model=self._config.model,
            retryable=is_retryable(code),
            raw=exc,
        )
