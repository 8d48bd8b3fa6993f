"""ChatStream Protocol (single-class module).

Pull-based cursor over an open streaming completion.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..streaming.stream_pull import StreamPull


@runtime_checkable
class ChatStream(Protocol):
    """Cursor driven by exactly one consumer issuing sequential pulls.

    ``recv`` blocks until the next chunk and returns a ``StreamPull`` tagged
    ``DELTA``, ``EMPTY`` or ``DONE``; read failures are raised. ``close``
    releases the underlying connection.
    """

    def recv(self) -> StreamPull:
        """Read the next chunk and translate it into a pull outcome."""
        ...

    def close(self) -> None:
        """Release the underlying connection."""
        ...
