"""
Tests for env-driven configuration (ic_messaging.config).
"""

from __future__ import annotations

import pytest

from ic_messaging.config import ClientSettings, get_settings
from ic_messaging.config.env import (
    DEFAULT_CANISTER_ID,
    DEFAULT_IC_HOST,
    DEFAULT_STATUS_TIMEOUT_SEC,
    LOCAL_REPLICA_HOST,
    get_ic_host,
    get_status_timeout_sec,
    is_local_replica,
)


def test_defaults_without_env():
    settings = get_settings()
    assert settings.canister_id == DEFAULT_CANISTER_ID
    assert settings.host == DEFAULT_IC_HOST
    assert settings.is_local is False
    assert settings.status_timeout_sec == DEFAULT_STATUS_TIMEOUT_SEC


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("IC_CANISTER_ID", " rrkah-fqaaa-aaaaa-aaaaq-cai ")
    monkeypatch.setenv("IC_HOST", "https://ic0.app/")
    monkeypatch.setenv("IC_STATUS_TIMEOUT_SEC", "5")
    settings = get_settings()
    assert settings.canister_id == "rrkah-fqaaa-aaaaa-aaaaq-cai"
    assert settings.host == "https://ic0.app"
    assert settings.status_timeout_sec == 5.0


@pytest.mark.parametrize("raw,expected", [("1", True), ("TRUE", True), ("on", True), ("0", False), ("", False)])
def test_is_local_replica(monkeypatch, raw, expected):
    monkeypatch.setenv("IC_LOCAL", raw)
    assert is_local_replica() is expected


def test_local_replica_host_default(monkeypatch):
    """IC_LOCAL without IC_HOST points at the local replica port."""
    monkeypatch.setenv("IC_LOCAL", "yes")
    assert get_ic_host() == LOCAL_REPLICA_HOST
    monkeypatch.setenv("IC_HOST", "http://localhost:8080")
    assert get_ic_host() == "http://localhost:8080"


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_bad_timeout_falls_back(monkeypatch, raw):
    monkeypatch.setenv("IC_STATUS_TIMEOUT_SEC", raw)
    assert get_status_timeout_sec() == DEFAULT_STATUS_TIMEOUT_SEC


def test_empty_canister_id_rejected():
    with pytest.raises(ValueError, match="canister_id"):
        ClientSettings(canister_id="  ")
