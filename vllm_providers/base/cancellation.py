"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose the call-scoped cancellation constructs via the canonical
``vllm_providers.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts``.

Notes
-----
- ``CancellationToken`` is the ambient cancellation signal accepted by
  ``chat`` and ``chat_stream``. This layer imposes no timeouts; callers cancel
  the token when their own deadline passes.
- ``CancelledError`` is raised by operations that observe a cancellation request.
- ``run_cancellable`` lets a token abandon a blocking call that is in flight.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken
from .cancellation_parts.run_cancellable import run_cancellable

__all__ = ["CancellationToken", "CancelledError", "run_cancellable"]
