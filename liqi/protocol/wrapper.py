"""Inner named-payload codec.

Every Notify and Request body (and the body of a Response) is an
``lq.Wrapper { string name = 1; bytes data = 2; }`` protobuf message. The
wrapper type is built from a descriptor at import time so no generated
``_pb2`` module is needed.
"""

from __future__ import annotations

from typing import TypeVar

from google.protobuf.message import Message, DecodeError
from google.protobuf import descriptor_pb2, message_factory, descriptor_pool

from liqi.errors import PayloadDecodeError, MalformedFrameError
from liqi.config.protocol import WRAPPER_MESSAGE, WRAPPER_PACKAGE, WRAPPER_FILE_NAME

MessageT = TypeVar("MessageT", bound=Message)

_FieldProto = descriptor_pb2.FieldDescriptorProto


def _build_wrapper_class() -> type[Message]:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=WRAPPER_FILE_NAME,
        package=WRAPPER_PACKAGE,
        syntax="proto3",
    )
    wrapper = file_proto.message_type.add(name=WRAPPER_MESSAGE)
    wrapper.field.add(name="name", number=1, type=_FieldProto.TYPE_STRING, label=_FieldProto.LABEL_OPTIONAL)
    wrapper.field.add(name="data", number=2, type=_FieldProto.TYPE_BYTES, label=_FieldProto.LABEL_OPTIONAL)

    pool = descriptor_pool.DescriptorPool()
    pool.AddSerializedFile(file_proto.SerializeToString())
    descriptor = pool.FindMessageTypeByName(f"{WRAPPER_PACKAGE}.{WRAPPER_MESSAGE}")
    return message_factory.GetMessageClass(descriptor)


Wrapper = _build_wrapper_class()


def wrap_named_bytes(name: str, data: bytes) -> bytes:
    return Wrapper(name=name, data=bytes(data)).SerializeToString()


def wrap_named(name: str, message: Message) -> bytes:
    return wrap_named_bytes(name, message.SerializeToString())


def unwrap_named(body: bytes) -> tuple[str, bytes]:
    """Split a wrapper body into ``(name, payload)`` without decoding the payload."""
    try:
        wrapper = Wrapper.FromString(bytes(body))
    except DecodeError as exc:
        raise MalformedFrameError(f"undecodable named payload ({len(body)} bytes): {exc}") from exc
    return wrapper.name, wrapper.data


def decode_payload(payload: bytes, result_type: type[MessageT]) -> MessageT:
    try:
        return result_type.FromString(payload)
    except DecodeError as exc:
        raise PayloadDecodeError(result_type.DESCRIPTOR.full_name, str(exc)) from exc


__all__ = [
    "MessageT",
    "Wrapper",
    "decode_payload",
    "unwrap_named",
    "wrap_named",
    "wrap_named_bytes",
]
