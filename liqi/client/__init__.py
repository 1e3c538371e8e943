from .session import Session
from .connect import connect
from .dispatch import Dispatcher
from .pending import PendingCall
from .heartbeat import HeartbeatLoop
from .registry import PendingCallRegistry
from .notifications import NotificationHandler, NotificationRouter

__all__ = [
    "Dispatcher",
    "HeartbeatLoop",
    "NotificationHandler",
    "NotificationRouter",
    "PendingCall",
    "PendingCallRegistry",
    "Session",
    "connect",
]
