"""Configuration module exports (env names, defaults and wire constants only)."""

from .protocol import (
    SEQUENCE_MODULUS,
    HEARTBEAT_METHOD,
)
from .calls import (
    DEFAULT_CALL_TIMEOUT_S,
    DEFAULT_HEARTBEAT_INTERVAL_S,
)

__all__ = [
    "DEFAULT_CALL_TIMEOUT_S",
    "DEFAULT_HEARTBEAT_INTERVAL_S",
    "HEARTBEAT_METHOD",
    "SEQUENCE_MODULUS",
]
