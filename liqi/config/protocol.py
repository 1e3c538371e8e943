"""Wire protocol constants for the binary envelope."""

from __future__ import annotations

# Leading byte of every frame.
KIND_NOTIFY = 1
KIND_REQUEST = 2
KIND_RESPONSE = 3

KIND_SIZE = 1
SEQUENCE_SIZE = 2
NOTIFY_HEADER_SIZE = KIND_SIZE
CALL_HEADER_SIZE = KIND_SIZE + SEQUENCE_SIZE

# The peer wraps request indexes at this value, not at 2**16.
SEQUENCE_MODULUS = 60007

# Inner named payload: lq.Wrapper { string name = 1; bytes data = 2; }
WRAPPER_PACKAGE = "lq"
WRAPPER_MESSAGE = "Wrapper"
WRAPPER_FILE_NAME = "liqi/wrapper.proto"

METHOD_PREFIX = ".lq."
SERVICE_LOBBY = "Lobby"
SERVICE_FAST_TEST = "FastTest"

# Spelled the way the server spells it.
HEARTBEAT_METHOD = "heatbeat"

__all__ = [
    "CALL_HEADER_SIZE",
    "HEARTBEAT_METHOD",
    "KIND_NOTIFY",
    "KIND_REQUEST",
    "KIND_RESPONSE",
    "KIND_SIZE",
    "METHOD_PREFIX",
    "NOTIFY_HEADER_SIZE",
    "SEQUENCE_MODULUS",
    "SEQUENCE_SIZE",
    "SERVICE_FAST_TEST",
    "SERVICE_LOBBY",
    "WRAPPER_FILE_NAME",
    "WRAPPER_MESSAGE",
    "WRAPPER_PACKAGE",
]
