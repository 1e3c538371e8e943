"""Outer binary framing: kind byte, optional little-endian sequence, body.

    byte 0      kind (1 = Notify, 2 = Request, 3 = Response)
    bytes 1-2   sequence, uint16 LE (Request/Response only)
    rest        named payload (see `liqi.protocol.wrapper`)
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

from google.protobuf.message import Message

from liqi.errors import MalformedFrameError
from liqi.config.protocol import KIND_SIZE, SEQUENCE_SIZE

from .kinds import MessageKind
from .wrapper import wrap_named

_SEQUENCE = struct.Struct("<H")


@dataclass(frozen=True, slots=True)
class Envelope:
    kind: MessageKind
    sequence: int | None
    body: bytes


def encode_envelope(kind: MessageKind, body: bytes, sequence: int | None = None) -> bytes:
    kind = MessageKind(kind)
    if not kind.has_sequence:
        if sequence is not None:
            raise ValueError("notify frames do not carry a sequence")
        return bytes((kind,)) + bytes(body)
    if sequence is None:
        raise ValueError(f"{kind.name.lower()} frames require a sequence")
    if not 0 <= sequence <= 0xFFFF:
        raise ValueError(f"sequence {sequence} does not fit in uint16")
    return bytes((kind,)) + _SEQUENCE.pack(sequence) + bytes(body)


def encode_request(sequence: int, name: str, message: Message) -> bytes:
    return encode_envelope(MessageKind.REQUEST, wrap_named(name, message), sequence)


def decode_envelope(data: bytes) -> Envelope:
    if not data:
        raise MalformedFrameError("empty frame")
    try:
        kind = MessageKind(data[0])
    except ValueError as exc:
        raise MalformedFrameError(f"unknown frame kind {data[0]}") from exc

    if len(data) < kind.header_size:
        raise MalformedFrameError(
            f"{kind.name.lower()} frame too short: {len(data)} bytes < {kind.header_size} byte header"
        )
    if not kind.has_sequence:
        return Envelope(kind=kind, sequence=None, body=bytes(data[KIND_SIZE:]))

    (sequence,) = _SEQUENCE.unpack_from(data, KIND_SIZE)
    return Envelope(kind=kind, sequence=sequence, body=bytes(data[KIND_SIZE + SEQUENCE_SIZE :]))


__all__ = ["Envelope", "decode_envelope", "encode_envelope", "encode_request"]
