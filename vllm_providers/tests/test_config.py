"""Tests for layered configuration and ``ClientConfig`` construction.

Merge order (later wins): defaults -> config file -> environment -> overrides.
"""
from __future__ import annotations

import json

import pytest

from vllm_providers.config import get_provider_config, reset_config_cache
from vllm_providers.base.dto import AdapterParams
from vllm_providers.base.errors import ConfigurationError
from vllm_providers.vllm import ClientConfig


def test_defaults_supply_local_base_url():
    cfg = get_provider_config("vllm")
    assert cfg == {"base_url": "http://localhost:8000"}  # nosec B101 - pytest assert in tests


def test_yaml_file_then_env_then_overrides(tmp_path, monkeypatch):
    path = tmp_path / "providers.yaml"
    path.write_text(
        "vllm:\n  base_url: http://file:8000\n  model: file-model\n  api_key: file-key\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("VLLM_PROVIDERS_CONFIG_FILE", str(path))
    monkeypatch.setenv("VLLM_MODEL", "env-model")
    reset_config_cache()

    cfg = get_provider_config("vllm", {"api_key": "override-key", "base_url": None})

    assert cfg["base_url"] == "http://file:8000"  # nosec B101 - None overrides are ignored
    assert cfg["model"] == "env-model"  # nosec B101 - pytest assert in tests
    assert cfg["api_key"] == "override-key"  # nosec B101 - pytest assert in tests


def test_json_file_is_accepted(tmp_path, monkeypatch):
    path = tmp_path / "providers.json"
    path.write_text(json.dumps({"vllm": {"model": "json-model"}}), encoding="utf-8")
    monkeypatch.setenv("VLLM_PROVIDERS_CONFIG_FILE", str(path))
    reset_config_cache()

    assert get_provider_config("vllm")["model"] == "json-model"  # nosec B101 - pytest assert in tests


def test_missing_config_file_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("VLLM_PROVIDERS_CONFIG_FILE", str(tmp_path / "absent.yaml"))
    reset_config_cache()

    assert get_provider_config("vllm")["base_url"] == "http://localhost:8000"  # nosec B101 - pytest assert in tests


def test_client_config_from_environment(monkeypatch):
    monkeypatch.setenv("VLLM_BASE_URL", "http://gpu:9000/")
    monkeypatch.setenv("VLLM_MODEL", "qwen")
    monkeypatch.setenv("VLLM_API_KEY", "dummy")
    monkeypatch.setenv("VLLM_TIMEOUT_SECONDS", "12.5")

    cfg = ClientConfig.from_provider_config()

    assert cfg.api_root == "http://gpu:9000/v1"  # nosec B101 - pytest assert in tests
    assert cfg.model == "qwen" and cfg.api_key == "dummy"  # nosec B101 - pytest assert in tests
    assert cfg.timeout_seconds == 12.5  # nosec B101 - pytest assert in tests


def test_client_config_without_model_fails_validation():
    cfg = ClientConfig.from_provider_config()

    assert cfg.timeout_seconds is None  # nosec B101 - no timeout unless configured
    with pytest.raises(ConfigurationError) as ei:
        cfg.validate()
    assert "model" in str(ei.value)  # nosec B101 - pytest assert in tests


def test_client_config_from_params():
    params = AdapterParams(base_url="http://h:1", model="m", api_key="k", headers={"X-Team": "a"})

    cfg = ClientConfig.from_params(params)

    assert (cfg.base_url, cfg.model, cfg.api_key) == ("http://h:1", "m", "k")  # nosec B101 - pytest assert in tests
    assert cfg.headers == {"X-Team": "a"}  # nosec B101 - pytest assert in tests


def test_adapter_params_rejects_non_positive_timeout():
    with pytest.raises(ValueError):
        AdapterParams(base_url="http://h:1", model="m", timeout_seconds=0)
