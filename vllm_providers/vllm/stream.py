"""Pull-based stream cursor over an OpenAI-compatible chunk stream.

Purpose
-------
Turn the SDK's chunk iterator into the three-outcome pull protocol of
``ChatStream``: each ``recv()`` yields a content delta, an empty pull, or the
end-of-stream signal. Read failures are raised as the underlying exception.

State machine
-------------
- open: pulls read one chunk each.
- done: the server sent ``[DONE]``; every later pull returns DONE without I/O.
- failed: a read raised; every later pull re-raises the same exception.
- closed: the caller released the connection; later pulls return DONE.
- cancelled: the token fired; the connection is released and pulls raise
  ``CancelledError``.

Concurrency
-----------
One consumer per cursor. ``close()`` may also be called from the thread that
cancels the token, so the release is guarded by a lock and happens once.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Iterator, Optional

from ..base.cancellation import CancellationToken, CancelledError
from ..base.errors import classify_exception
from ..base.logging import LogContext, normalized_log_event
from ..base.models import ChatResponse, Message, ProviderMetadata, ROLE_ASSISTANT
from ..base.streaming import DONE_PULL, EMPTY_PULL, PullOutcome, StreamMetrics, StreamPull, finalize_stream
from .helpers import delta_content, first_choice


class VLLMChatStream:
    """Cursor over one streaming chat exchange.

    Owns the network connection until ``close()`` (or the end of the stream).
    Usable as a context manager and as an iterator of delta ``ChatResponse``
    objects.
    """

    def __init__(
        self,
        stream: Any,
        *,
        provider: str,
        model: str,
        logger: logging.Logger,
        ctx: LogContext,
        token: Optional[CancellationToken] = None,
    ) -> None:
        self._stream = stream
        self._chunks = iter(stream)
        self._provider = provider
        self._model = model
        self._logger = logger
        self._ctx = ctx
        self._token = token
        self._lock = threading.Lock()
        self._released = False
        self._closed = False
        self._done = False
        self._error: Optional[BaseException] = None
        self._finalized = False
        self._metrics = StreamMetrics()
        self._t0 = time.perf_counter()
        if token is not None:
            token.add_callback(self._release)

    # ----- ChatStream protocol -----
    def recv(self) -> StreamPull:
        """Pull the next outcome from the stream.

        Raises:
            CancelledError: The bound token was cancelled.
            Exception: The underlying read error, verbatim, on this and every
                later pull.
        """
        if self._error is not None:
            raise self._error
        if self._done:
            return DONE_PULL
        if self._cancelled():
            raise self._fail_cancelled()
        if self._closed:
            return DONE_PULL

        try:
            chunk = next(self._chunks)
        except StopIteration:
            self._done = True
            self._release()
            self._finalize("stream.end")
            return DONE_PULL
        except Exception as exc:
            if self._cancelled():
                raise self._fail_cancelled() from exc
            self._error = exc
            self._release()
            self._finalize("stream.error", error=str(exc), error_code=classify_exception(exc).value)
            raise

        return self._translate(chunk)

    def close(self) -> None:
        """Release the connection. Safe to call any number of times."""
        self._closed = True
        self._release()
        if self._cancelled():
            self._finalize("stream.cancelled", error=self._cancel_reason())
        else:
            self._finalize("stream.end", closed_early=not self._done)

    # ----- conveniences -----
    def __enter__(self) -> "VLLMChatStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[ChatResponse]:
        try:
            while True:
                pull = self.recv()
                if pull.outcome is PullOutcome.DONE:
                    return
                if pull.outcome is PullOutcome.DELTA and pull.response is not None:
                    yield pull.response
        finally:
            self.close()

    @property
    def metrics(self) -> StreamMetrics:
        return self._metrics

    @property
    def closed(self) -> bool:
        return self._released

    # ----- internals -----
    def _translate(self, chunk: Any) -> StreamPull:
        content = delta_content(chunk)
        if not content:
            self._metrics.empty += 1
            return EMPTY_PULL

        self._metrics.emitted += 1
        if self._metrics.time_to_first_token_ms is None:
            self._metrics.time_to_first_token_ms = (time.perf_counter() - self._t0) * 1000.0
        response_id = getattr(chunk, "id", None)
        if response_id and not self._ctx.response_id:
            self._ctx.response_id = response_id
        choice = first_choice(chunk)
        meta = ProviderMetadata(
            provider_name=self._provider,
            model_name=self._model,
            response_id=response_id,
            finish_reason=getattr(choice, "finish_reason", None),
        )
        normalized_log_event(
            self._logger,
            "stream.delta",
            self._ctx,
            phase="stream",
            emitted=True,
            level=logging.DEBUG,
            delta_len=len(content),
        )
        return StreamPull(PullOutcome.DELTA, ChatResponse(message=Message(role=ROLE_ASSISTANT, content=content), meta=meta))

    def _release(self) -> None:
        with self._lock:
            if self._released:
                return
            self._released = True
        if self._token is not None:
            self._token.remove_callback(self._release)
        close = getattr(self._stream, "close", None)
        if callable(close):
            close()

    def _cancelled(self) -> bool:
        return self._token is not None and self._token.cancelled

    def _cancel_reason(self) -> str:
        return (self._token.reason if self._token is not None else None) or "stream cancelled"

    def _fail_cancelled(self) -> CancelledError:
        err = CancelledError(self._cancel_reason())
        self._error = err
        self._release()
        self._finalize("stream.cancelled", error=self._cancel_reason())
        return err

    def _finalize(self, event: str, *, error: Optional[str] = None, error_code: Optional[str] = None, **extra: Any) -> None:
        if self._finalized:
            return
        self._finalized = True
        self._metrics.total_duration_ms = (time.perf_counter() - self._t0) * 1000.0
        finalize_stream(
            logger=self._logger,
            ctx=self._ctx,
            metrics=self._metrics,
            event=event,
            error=error,
            error_code=error_code,
            **extra,
        )


__all__ = ["VLLMChatStream"]
