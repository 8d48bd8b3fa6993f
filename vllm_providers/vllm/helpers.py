"""
Translation helpers between the adapter DTOs and OpenAI-style SDK objects.

Purpose:
- Build request payloads (messages and call parameters) from ``ChatRequest``.
- Pull the pieces the adapter needs out of SDK completion and chunk objects.

External dependencies:
- None at import time; SDK objects are accessed by attribute only, so fakes
  with the same shape work in tests.

No network I/O happens here.
"""

from __future__ import annotations

import typing as _t

from ..base.models import ChatRequest


def build_messages(request: ChatRequest) -> list[dict]:
    """Return the wire messages for ``request``, in order and unmodified."""
    return [m.to_wire() for m in request.messages]


def build_chat_params(model: str, messages: list[dict], request: ChatRequest, *, stream: bool) -> dict:
    """Assemble keyword arguments for ``client.chat.completions.create``.

    Optional sampling fields are included only when set on the request.
    """
    params: dict = {"model": model, "messages": messages, "stream": stream}
    if request.max_tokens is not None:
        params["max_tokens"] = int(request.max_tokens)
    if request.temperature is not None:
        params["temperature"] = float(request.temperature)
    return params


def first_choice(obj: _t.Any) -> _t.Any:
    """Return the first choice of a completion or chunk, or ``None`` if there are none."""
    choices = getattr(obj, "choices", None) or []
    return choices[0] if choices else None


def delta_content(chunk: _t.Any) -> str:
    """Extract the content fragment from a streaming chunk.

    Returns an empty string for chunks without choices, without a delta, or
    whose delta carries no content (role-only and keepalive chunks).
    """
    choice = first_choice(chunk)
    if choice is None:
        return ""
    delta = getattr(choice, "delta", None)
    if delta is None:
        return ""
    return getattr(delta, "content", None) or ""


__all__ = ["build_messages", "build_chat_params", "first_choice", "delta_content"]
