"""Shared builders for HTTP-level adapter tests.

The ``openai`` SDK is given an ``httpx.Client`` backed by
``httpx.MockTransport``, so requests are encoded and responses decoded by the
real SDK while no socket is opened.
"""
from __future__ import annotations

import json
from typing import Callable, Iterable, List, Optional

import httpx

from vllm_providers.vllm import ClientConfig, VLLMProvider

Handler = Callable[[httpx.Request], httpx.Response]


def completion_body(content: Optional[str] = "hi", *, role: str = "assistant", choices: Optional[list] = None) -> dict:
    """Return a ``chat.completion`` JSON body with one choice (or ``choices``)."""
    if choices is None:
        choices = [
            {
                "index": 0,
                "message": {"role": role, "content": content},
                "finish_reason": "stop",
            }
        ]
    return {
        "id": "cmpl-1",
        "object": "chat.completion",
        "created": 0,
        "model": "m",
        "choices": choices,
    }


def chunk(content: Optional[str] = None, *, role: Optional[str] = None, finish_reason: Optional[str] = None) -> dict:
    """Return one ``chat.completion.chunk`` with a single choice."""
    delta: dict = {}
    if role is not None:
        delta["role"] = role
    if content is not None:
        delta["content"] = content
    return {
        "id": "chunk-1",
        "object": "chat.completion.chunk",
        "created": 0,
        "model": "m",
        "choices": [{"index": 0, "delta": delta, "finish_reason": finish_reason}],
    }


def empty_chunk() -> dict:
    """Return a chunk without choices (as sent for trailing usage data)."""
    return {"id": "chunk-1", "object": "chat.completion.chunk", "created": 0, "model": "m", "choices": []}


def sse(chunks: Iterable[dict], *, done: bool = True) -> bytes:
    """Encode chunks as ``data:`` events, terminated by ``[DONE]``."""
    body = "".join(f"data: {json.dumps(c)}\n\n" for c in chunks)
    if done:
        body += "data: [DONE]\n\n"
    return body.encode("utf-8")


def sse_response(chunks: Iterable[dict]) -> httpx.Response:
    return httpx.Response(200, headers={"content-type": "text/event-stream"}, content=sse(chunks))


class TrackingStream(httpx.SyncByteStream):
    """Byte stream recording ``close`` and optionally failing after its parts."""

    def __init__(self, parts: List[bytes], error: Optional[Exception] = None) -> None:
        self._parts = parts
        self._error = error
        self.close_calls = 0

    def __iter__(self):
        for part in self._parts:
            yield part
        if self._error is not None:
            raise self._error

    def close(self) -> None:
        self.close_calls += 1


class Recorder:
    """MockTransport handler that records requests and replays a responder."""

    def __init__(self, respond: Handler) -> None:
        self._respond = respond
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


def make_provider(
    respond: Handler,
    *,
    base_url: str = "http://gpu:8000",
    model: str = "m",
    api_key: str = "secret",
) -> tuple[VLLMProvider, Recorder]:
    """Build a provider whose SDK talks to ``respond`` through MockTransport."""
    recorder = Recorder(respond)
    http_client = httpx.Client(transport=httpx.MockTransport(recorder))
    provider = VLLMProvider(
        ClientConfig(base_url=base_url, model=model, api_key=api_key),
        http_client=http_client,
    )
    return provider, recorder
