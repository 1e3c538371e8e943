"""Shared error types for the liqi client transport."""

from __future__ import annotations

from dataclasses import dataclass


class LiqiError(Exception):
    """Base class for every error raised by the transport."""


@dataclass(eq=False)
class ConnectError(LiqiError):
    """Raised when the WebSocket dial or handshake fails."""

    endpoint: str
    reason: str

    def __post_init__(self) -> None:
        LiqiError.__init__(self, f"failed to connect to {self.endpoint}: {self.reason}")


@dataclass(eq=False)
class SendError(LiqiError):
    """Raised when writing a request frame fails. Fatal to that call only."""

    name: str
    sequence: int
    reason: str

    def __post_init__(self) -> None:
        LiqiError.__init__(self, f"failed to send {self.name} (seq={self.sequence}): {self.reason}")


class MalformedFrameError(LiqiError):
    """Raised by the codec for frames that are too short or undecodable."""


@dataclass(eq=False)
class UnmatchedResponseError(LiqiError):
    """A response arrived for a sequence with no pending call."""

    sequence: int

    def __post_init__(self) -> None:
        LiqiError.__init__(self, f"no pending call for response seq={self.sequence}")


@dataclass(eq=False)
class PayloadDecodeError(LiqiError):
    """The reply payload does not decode as the type the caller registered."""

    result_type: str
    reason: str

    def __post_init__(self) -> None:
        LiqiError.__init__(self, f"cannot decode reply as {self.result_type}: {self.reason}")


@dataclass(eq=False)
class DuplicateSequenceError(LiqiError):
    """A sequence number was registered while a call using it is still pending."""

    sequence: int

    def __post_init__(self) -> None:
        LiqiError.__init__(self, f"sequence {self.sequence} is already pending")


class SessionClosedError(LiqiError):
    """The session is closed, or closed while the call was pending."""


@dataclass(eq=False)
class CallTimeoutError(LiqiError):
    """No reply arrived within the call timeout."""

    name: str
    sequence: int
    timeout_s: float

    def __post_init__(self) -> None:
        LiqiError.__init__(self, f"{self.name} (seq={self.sequence}) timed out after {self.timeout_s:.3f}s")


__all__ = [
    "CallTimeoutError",
    "ConnectError",
    "DuplicateSequenceError",
    "LiqiError",
    "MalformedFrameError",
    "PayloadDecodeError",
    "SendError",
    "SessionClosedError",
    "UnmatchedResponseError",
]
