"""Cancellation error type.

Defines the public ``CancelledError`` used to signal cooperative cancellation
of chat calls and streams.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Distinguishes cancellation from transport failures so callers can skip
    error reporting for requests they aborted themselves.
    """

__all__ = ["CancelledError"]
