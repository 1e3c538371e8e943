from .session import SessionState
from .settings import (
    CallSettings,
    ClientSettings,
    HeartbeatSettings,
    WebSocketSettings,
)

__all__ = [
    "CallSettings",
    "ClientSettings",
    "HeartbeatSettings",
    "SessionState",
    "WebSocketSettings",
]
