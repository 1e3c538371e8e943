"""Frame kinds carried in the first byte of every envelope."""

from __future__ import annotations

import enum

from liqi.config.protocol import (
    KIND_NOTIFY,
    KIND_REQUEST,
    KIND_RESPONSE,
    CALL_HEADER_SIZE,
    NOTIFY_HEADER_SIZE,
)


class MessageKind(enum.IntEnum):
    NOTIFY = KIND_NOTIFY
    REQUEST = KIND_REQUEST
    RESPONSE = KIND_RESPONSE

    @property
    def has_sequence(self) -> bool:
        return self is not MessageKind.NOTIFY

    @property
    def header_size(self) -> int:
        return CALL_HEADER_SIZE if self.has_sequence else NOTIFY_HEADER_SIZE


__all__ = ["MessageKind"]
