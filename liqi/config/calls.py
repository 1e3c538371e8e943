"""Call and heartbeat timing (env names and defaults)."""

from __future__ import annotations

ENV_CALL_TIMEOUT_S = "LIQI_CALL_TIMEOUT_S"
ENV_HEARTBEAT_INTERVAL_S = "LIQI_HEARTBEAT_INTERVAL_S"

# 0 disables the timeout and waits for the reply indefinitely.
DEFAULT_CALL_TIMEOUT_S = 10.0
# 0 disables the heartbeat loop.
DEFAULT_HEARTBEAT_INTERVAL_S = 6.0

__all__ = [
    "DEFAULT_CALL_TIMEOUT_S",
    "DEFAULT_HEARTBEAT_INTERVAL_S",
    "ENV_CALL_TIMEOUT_S",
    "ENV_HEARTBEAT_INTERVAL_S",
]
