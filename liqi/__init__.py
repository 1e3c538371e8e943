"""Multiplexed request/response client for the liqi binary WebSocket protocol."""

from .client import Session, NotificationRouter, connect
from .protocol import MessageKind, lobby_method, method_name, fast_test_method
from .errors import (
    SendError,
    LiqiError,
    ConnectError,
    CallTimeoutError,
    PayloadDecodeError,
    SessionClosedError,
    MalformedFrameError,
    DuplicateSequenceError,
    UnmatchedResponseError,
)

__all__ = [
    "CallTimeoutError",
    "ConnectError",
    "DuplicateSequenceError",
    "LiqiError",
    "MalformedFrameError",
    "MessageKind",
    "NotificationRouter",
    "PayloadDecodeError",
    "SendError",
    "Session",
    "SessionClosedError",
    "UnmatchedResponseError",
    "connect",
    "fast_test_method",
    "lobby_method",
    "method_name",
]
