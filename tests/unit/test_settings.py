from __future__ import annotations

import pytest

from liqi.client.connect import get_ws_options
from liqi.runtime.settings import load_settings
from liqi.config import DEFAULT_CALL_TIMEOUT_S, DEFAULT_HEARTBEAT_INTERVAL_S


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LIQI_CALL_TIMEOUT_S", "LIQI_HEARTBEAT_INTERVAL_S", "LIQI_MAX_READ_ERRORS"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()
    assert settings.calls.timeout_s == DEFAULT_CALL_TIMEOUT_S
    assert settings.heartbeat.interval_s == DEFAULT_HEARTBEAT_INTERVAL_S == 6.0
    assert settings.websocket.max_read_errors == 5


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LIQI_CALL_TIMEOUT_S", "2.5")
    monkeypatch.setenv("LIQI_HEARTBEAT_INTERVAL_S", "0")
    monkeypatch.setenv("LIQI_WS_MAX_MESSAGE_BYTES", "1024")

    settings = load_settings()
    assert settings.calls.timeout_s == 2.5
    assert settings.heartbeat.interval_s == 0.0
    assert settings.websocket.max_message_bytes == 1024


def test_invalid_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LIQI_CALL_TIMEOUT_S", "soon")
    monkeypatch.setenv("LIQI_MAX_READ_ERRORS", "-3")
    monkeypatch.setenv("LIQI_OPEN_TIMEOUT_S", "0")

    settings = load_settings()
    assert settings.calls.timeout_s == DEFAULT_CALL_TIMEOUT_S
    assert settings.websocket.max_read_errors == 0
    assert settings.websocket.open_timeout_s == 10.0


def test_ws_options(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LIQI_WS_PING_INTERVAL_S", "0")

    options = get_ws_options(load_settings(), "https://game.example")
    assert options["origin"] == "https://game.example"
    assert options["ping_interval"] is None
    assert options["max_size"] == 16 * 1024 * 1024
