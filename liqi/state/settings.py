"""Client settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CallSettings:
    timeout_s: float


@dataclass(frozen=True, slots=True)
class HeartbeatSettings:
    interval_s: float


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    open_timeout_s: float
    close_timeout_s: float
    ping_interval_s: float
    ping_timeout_s: float
    max_message_bytes: int
    max_read_errors: int


@dataclass(frozen=True, slots=True)
class ClientSettings:
    calls: CallSettings
    heartbeat: HeartbeatSettings
    websocket: WebSocketSettings


__all__ = [
    "CallSettings",
    "ClientSettings",
    "HeartbeatSettings",
    "WebSocketSettings",
]
