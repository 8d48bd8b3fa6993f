"""Blocking-call guard that lets a cancellation token abandon the call.

Purpose
-------
A synchronous SDK call cannot be interrupted from the calling thread. The call
therefore runs on a daemon worker thread while the caller waits on an event
that is set either when the call finishes or when the token fires. On cancel
the caller raises ``CancelledError`` at once; a result that arrives afterwards
is handed to ``discard`` so its connection is released.

Without a token the call runs inline and no thread is started.
"""

from __future__ import annotations

import threading
from contextlib import suppress
from typing import Callable, Optional, TypeVar

from .cancellation_token import CancellationToken
from .cancelled_error import CancelledError

T = TypeVar("T")


def run_cancellable(
    call: Callable[[], T],
    token: Optional[CancellationToken],
    *,
    discard: Optional[Callable[[T], None]] = None,
    reason: str = "operation cancelled",
) -> T:
    """Run ``call`` and return its result unless ``token`` fires first.

    Raises:
        CancelledError: ``token`` was cancelled before ``call`` finished.
        Exception: Whatever ``call`` raised, re-raised in the caller.
    """
    if token is None:
        return call()
    token.raise_if_cancelled()

    finished = threading.Event()
    lock = threading.Lock()
    outcome: dict = {}

    def worker() -> None:
        try:
            value = call()
        except BaseException as exc:  # re-raised by the waiting caller
            with lock:
                outcome["error"] = exc
            finished.set()
            return
        with lock:
            outcome["value"] = value
            abandoned = outcome.get("abandoned", False)
        finished.set()
        if abandoned and discard is not None:
            # nobody is waiting for this result
            with suppress(Exception):
                discard(value)

    token.add_callback(finished.set)
    if token.cancelled:
        token.remove_callback(finished.set)
        raise CancelledError(token.reason or reason)
    threading.Thread(target=worker, name="vllm-call", daemon=True).start()
    try:
        finished.wait()
    finally:
        token.remove_callback(finished.set)

    with lock:
        if "value" not in outcome and "error" not in outcome:
            outcome["abandoned"] = True
            raise CancelledError(token.reason or reason)
    if "error" in outcome:
        raise outcome["error"]
    return outcome["value"]


__all__ = ["run_cancellable"]
