"""Environment parsing for client settings.

Env names and defaults live in `liqi/config/*`; this module resolves them into
the structured dataclasses the session consumes. Unparseable values fall back
to their defaults rather than failing the caller.
"""

from __future__ import annotations

import os

from liqi.state.settings import (
    CallSettings,
    ClientSettings,
    HeartbeatSettings,
    WebSocketSettings,
)
from liqi.config.calls import (
    ENV_CALL_TIMEOUT_S,
    DEFAULT_CALL_TIMEOUT_S,
    ENV_HEARTBEAT_INTERVAL_S,
    DEFAULT_HEARTBEAT_INTERVAL_S,
)
from liqi.config.websocket import (
    ENV_WS_OPEN_TIMEOUT_S,
    ENV_WS_CLOSE_TIMEOUT_S,
    ENV_WS_PING_TIMEOUT_S,
    ENV_WS_MAX_READ_ERRORS,
    ENV_WS_PING_INTERVAL_S,
    ENV_WS_MAX_MESSAGE_BYTES,
    DEFAULT_WS_OPEN_TIMEOUT_S,
    DEFAULT_WS_CLOSE_TIMEOUT_S,
    DEFAULT_WS_PING_TIMEOUT_S,
    DEFAULT_WS_MAX_READ_ERRORS,
    DEFAULT_WS_PING_INTERVAL_S,
    DEFAULT_WS_MAX_MESSAGE_BYTES,
)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _load_call_settings() -> CallSettings:
    return CallSettings(timeout_s=max(0.0, _float_env(ENV_CALL_TIMEOUT_S, DEFAULT_CALL_TIMEOUT_S)))


def _load_heartbeat_settings() -> HeartbeatSettings:
    return HeartbeatSettings(
        interval_s=max(0.0, _float_env(ENV_HEARTBEAT_INTERVAL_S, DEFAULT_HEARTBEAT_INTERVAL_S)),
    )


def _load_websocket_settings() -> WebSocketSettings:
    open_timeout = _float_env(ENV_WS_OPEN_TIMEOUT_S, DEFAULT_WS_OPEN_TIMEOUT_S)
    close_timeout = _float_env(ENV_WS_CLOSE_TIMEOUT_S, DEFAULT_WS_CLOSE_TIMEOUT_S)
    ping_interval = _float_env(ENV_WS_PING_INTERVAL_S, DEFAULT_WS_PING_INTERVAL_S)
    ping_timeout = _float_env(ENV_WS_PING_TIMEOUT_S, DEFAULT_WS_PING_TIMEOUT_S)
    max_message_bytes = _int_env(ENV_WS_MAX_MESSAGE_BYTES, DEFAULT_WS_MAX_MESSAGE_BYTES)
    max_read_errors = _int_env(ENV_WS_MAX_READ_ERRORS, DEFAULT_WS_MAX_READ_ERRORS)

    if open_timeout <= 0:
        open_timeout = DEFAULT_WS_OPEN_TIMEOUT_S
    if close_timeout <= 0:
        close_timeout = DEFAULT_WS_CLOSE_TIMEOUT_S
    if max_message_bytes <= 0:
        max_message_bytes = DEFAULT_WS_MAX_MESSAGE_BYTES

    return WebSocketSettings(
        open_timeout_s=open_timeout,
        close_timeout_s=close_timeout,
        ping_interval_s=max(0.0, ping_interval),
        ping_timeout_s=max(0.0, ping_timeout),
        max_message_bytes=max_message_bytes,
        max_read_errors=max(0, max_read_errors),
    )


def load_settings() -> ClientSettings:
    return ClientSettings(
        calls=_load_call_settings(),
        heartbeat=_load_heartbeat_settings(),
        websocket=_load_websocket_settings(),
    )


__all__ = ["load_settings"]
