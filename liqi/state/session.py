"""Connection session lifecycle states."""

from __future__ import annotations

import enum


class SessionState(enum.Enum):
    OPEN = "open"
    # Terminal: a closed session never reopens.
    CLOSED = "closed"


__all__ = ["SessionState"]
