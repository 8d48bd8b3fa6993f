"""Unit tests for the named client registry and ``register_model``."""
from __future__ import annotations

import pytest

import vllm_providers
from vllm_providers.base.errors import ConfigurationError, ErrorCode, ProviderError
from vllm_providers.base.interfaces import ChatClient, LLMClient, StreamingChatClient
from vllm_providers.base.registry import ProviderRegistry, UnknownProviderError
from vllm_providers.vllm import VLLMProvider, register_model


def test_register_model_builds_provider_named_after_model():
    register_model("Mistral-7B", "http://gpu:8000", api_key="dummy")

    client = vllm_providers.create("Mistral-7B")

    assert isinstance(client, VLLMProvider)  # nosec B101 - pytest assert in tests
    assert client.name() == "Mistral-7B"  # nosec B101 - pytest assert in tests
    assert client.config.api_root == "http://gpu:8000/v1"  # nosec B101 - pytest assert in tests
    assert client.config.api_key == "dummy"  # nosec B101 - pytest assert in tests


def test_each_create_returns_a_new_client():
    register_model("m", "http://gpu:8000")

    assert ProviderRegistry.create("m") is not ProviderRegistry.create("m")  # nosec B101 - pytest assert in tests


def test_registered_client_satisfies_protocols():
    register_model("m", "http://gpu:8000")
    client = ProviderRegistry.create("m")

    for proto in (LLMClient, ChatClient, StreamingChatClient):
        assert isinstance(client, proto)  # nosec B101 - pytest assert in tests


def test_unknown_name_raises():
    with pytest.raises(UnknownProviderError):
        ProviderRegistry.create("nope")
    with pytest.raises(ProviderError) as ei:
        vllm_providers.create("nope")
    assert isinstance(ei.value.__cause__, UnknownProviderError)  # nosec B101 - pytest assert in tests
    assert ei.value.code is ErrorCode.NOT_FOUND  # nosec B101 - pytest assert in tests


def test_factory_failure_is_wrapped():
    def broken():
        raise RuntimeError("boom")

    ProviderRegistry.register("broken", broken)

    with pytest.raises(UnknownProviderError, match="boom"):
        ProviderRegistry.create("broken")


def test_register_replace_unregister_and_names():
    ProviderRegistry.register("b", lambda: "first")
    ProviderRegistry.register("a", lambda: "a")
    ProviderRegistry.register("b", lambda: "second")

    assert ProviderRegistry.names() == ["a", "b"]  # nosec B101 - pytest assert in tests
    assert ProviderRegistry.create("b") == "second"  # nosec B101 - pytest assert in tests
    assert ProviderRegistry.unregister("b") is True  # nosec B101 - pytest assert in tests
    assert ProviderRegistry.unregister("b") is False  # nosec B101 - pytest assert in tests
    assert ProviderRegistry.is_registered("a")  # nosec B101 - pytest assert in tests


def test_register_rejects_bad_input():
    with pytest.raises(ValueError):
        ProviderRegistry.register("  ", lambda: None)
    with pytest.raises(TypeError):
        ProviderRegistry.register("x", "not callable")  # type: ignore[arg-type]


def test_names_differing_only_in_case_are_distinct_models():
    register_model("Mistral", "http://gpu-a:8000")
    register_model("mistral", "http://gpu-b:8000")

    assert ProviderRegistry.names() == ["Mistral", "mistral"]  # nosec B101 - pytest assert in tests
    assert ProviderRegistry.create("Mistral").config.api_root == "http://gpu-a:8000/v1"  # nosec B101 - pytest assert in tests
    assert ProviderRegistry.create("mistral").config.api_root == "http://gpu-b:8000/v1"  # nosec B101 - pytest assert in tests
    assert not ProviderRegistry.is_registered("MISTRAL")  # nosec B101 - pytest assert in tests


def test_create_classifies_factory_failure_from_its_cause():
    def misconfigured():
        raise ConfigurationError(
            code=ErrorCode.CONFIGURATION,
            message="missing required setting(s): base_url",
            provider="vllm",
        )

    ProviderRegistry.register("bad", misconfigured)

    with pytest.raises(ProviderError) as ei:
        vllm_providers.create("bad")

    assert ei.value.code is ErrorCode.CONFIGURATION  # nosec B101 - pytest assert in tests
    assert isinstance(ei.value.__cause__, UnknownProviderError)  # nosec B101 - pytest assert in tests
