"""WebSocket connection configuration (env names and defaults)."""

from __future__ import annotations

ENV_WS_OPEN_TIMEOUT_S = "LIQI_OPEN_TIMEOUT_S"
ENV_WS_CLOSE_TIMEOUT_S = "LIQI_CLOSE_TIMEOUT_S"
ENV_WS_PING_INTERVAL_S = "LIQI_WS_PING_INTERVAL_S"
ENV_WS_PING_TIMEOUT_S = "LIQI_WS_PING_TIMEOUT_S"
ENV_WS_MAX_MESSAGE_BYTES = "LIQI_WS_MAX_MESSAGE_BYTES"
ENV_WS_MAX_READ_ERRORS = "LIQI_MAX_READ_ERRORS"

DEFAULT_WS_OPEN_TIMEOUT_S = 10.0
DEFAULT_WS_CLOSE_TIMEOUT_S = 5.0
# Protocol-level pings are independent of the application heartbeat; 0 disables them.
DEFAULT_WS_PING_INTERVAL_S = 20.0
DEFAULT_WS_PING_TIMEOUT_S = 20.0
DEFAULT_WS_MAX_MESSAGE_BYTES = 16 * 1024 * 1024
# Consecutive failed reads tolerated before the session gives up; 0 means never.
DEFAULT_WS_MAX_READ_ERRORS = 5

__all__ = [
    "DEFAULT_WS_CLOSE_TIMEOUT_S",
    "DEFAULT_WS_MAX_MESSAGE_BYTES",
    "DEFAULT_WS_MAX_READ_ERRORS",
    "DEFAULT_WS_OPEN_TIMEOUT_S",
    "DEFAULT_WS_PING_INTERVAL_S",
    "DEFAULT_WS_PING_TIMEOUT_S",
    "ENV_WS_CLOSE_TIMEOUT_S",
    "ENV_WS_MAX_MESSAGE_BYTES",
    "ENV_WS_MAX_READ_ERRORS",
    "ENV_WS_OPEN_TIMEOUT_S",
    "ENV_WS_PING_INTERVAL_S",
    "ENV_WS_PING_TIMEOUT_S",
]
