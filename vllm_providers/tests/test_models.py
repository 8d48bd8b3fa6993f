"""Unit tests for the chat DTOs and pull result types."""
from __future__ import annotations

import dataclasses

import pytest

from vllm_providers.base.models import ChatRequest, ChatResponse, Message, ProviderMetadata
from vllm_providers.base.streaming import DONE_PULL, EMPTY_PULL, PullOutcome
from vllm_providers.vllm.helpers import build_chat_params, build_messages, delta_content


def test_message_wire_shape_and_immutability():
    msg = Message("user", "hi")
    assert msg.to_wire() == {"role": "user", "content": "hi"}  # nosec B101 - pytest assert in tests
    with pytest.raises(dataclasses.FrozenInstanceError):
        msg.content = "changed"  # type: ignore[misc]


def test_build_messages_preserves_order_and_does_not_mutate():
    msgs = [Message("user", "1"), Message("assistant", "2"), Message("user", "3")]
    request = ChatRequest(messages=msgs)

    wire = build_messages(request)

    assert [m["content"] for m in wire] == ["1", "2", "3"]  # nosec B101 - pytest assert in tests
    assert request.messages == msgs  # nosec B101 - pytest assert in tests


def test_build_chat_params_omits_unset_sampling_fields():
    params = build_chat_params("m", [], ChatRequest(), stream=True)
    assert params == {"model": "m", "messages": [], "stream": True}  # nosec B101 - pytest assert in tests


def test_delta_content_handles_missing_parts():
    class _Obj:
        def __init__(self, **kw):
            self.__dict__.update(kw)

    assert delta_content(_Obj(choices=[])) == ""  # nosec B101 - pytest assert in tests
    assert delta_content(_Obj(choices=[_Obj(delta=None)])) == ""  # nosec B101 - pytest assert in tests
    assert delta_content(_Obj(choices=[_Obj(delta=_Obj(content=None))])) == ""  # nosec B101 - pytest assert in tests
    assert delta_content(_Obj(choices=[_Obj(delta=_Obj(content=" x "))])) == " x "  # nosec B101 - pytest assert in tests


def test_chat_response_text_and_dict():
    resp = ChatResponse(
        message=Message("assistant", "ok"),
        meta=ProviderMetadata(provider_name="vllm", model_name="m", response_id="r"),
    )
    assert resp.text == "ok"  # nosec B101 - pytest assert in tests
    data = resp.to_dict()
    assert data["message"] == {"role": "assistant", "content": "ok"}  # nosec B101 - pytest assert in tests
    assert data["meta"]["response_id"] == "r"  # nosec B101 - pytest assert in tests


def test_pull_constants():
    assert DONE_PULL.is_done and DONE_PULL.response is None  # nosec B101 - pytest assert in tests
    assert EMPTY_PULL.is_empty and not EMPTY_PULL.is_delta  # nosec B101 - pytest assert in tests
    assert PullOutcome.DONE.value == "done"  # nosec B101 - pytest assert in tests
