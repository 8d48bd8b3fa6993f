"""Shared HTTP client pool.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances so every adapter built against the same inference server shares
    one connection pool. The pooled client is handed to the ``openai`` SDK as
    its ``http_client``.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Timeout strategy:
    - Pooled clients carry no timeout. This layer imposes no timeouts;
      callers bound calls with their own cancellation policy.

Lifecycle & cleanup:
    - Clients are cached by ``(base_url, purpose)``.
    - All clients are closed at interpreter exit via ``atexit``. Tests may
      call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

# Internal cache keyed by (base_url, purpose)
_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: API root the client talks to. ``None`` groups clients under
            a shared key.
        purpose: A short string discriminating separate pools (e.g.,
            ``"chat"``). Keep stable to maximize reuse.

    Returns:
        A reusable ``httpx.Client`` instance. A pooled client that was closed
        by its user is replaced transparently.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        client = httpx.Client(timeout=None)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            try:
                c.close()
            except Exception:  # nosec B110 - best-effort shutdown
                pass
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
