from __future__ import annotations

import pytest
from google.protobuf.wrappers_pb2 import StringValue

from liqi.client import PendingCallRegistry
from liqi.protocol import wrap_named, wrap_named_bytes
from liqi.errors import (
    MalformedFrameError,
    PayloadDecodeError,
    SessionClosedError,
    DuplicateSequenceError,
)


@pytest.mark.asyncio
async def test_take_removes_exactly_once() -> None:
    registry = PendingCallRegistry()
    pending = registry.register(1, "Example.Foo", StringValue)

    assert 1 in registry
    assert registry.take(1) is pending
    assert 1 not in registry
    assert registry.take(1) is None


@pytest.mark.asyncio
async def test_duplicate_sequence_rejected() -> None:
    registry = PendingCallRegistry()
    registry.register(5, "a", StringValue)
    with pytest.raises(DuplicateSequenceError) as exc:
        registry.register(5, "b", StringValue)
    assert exc.value.sequence == 5
    assert len(registry) == 1


@pytest.mark.asyncio
async def test_discard_only_removes_same_entry() -> None:
    registry = PendingCallRegistry()
    stale = registry.register(9, "old", StringValue)
    registry.take(9)
    fresh = registry.register(9, "new", StringValue)

    assert registry.discard(stale) is False
    assert 9 in registry
    assert registry.discard(fresh) is True
    assert len(registry) == 0


@pytest.mark.asyncio
async def test_resolve_decodes_into_registered_type() -> None:
    registry = PendingCallRegistry()
    pending = registry.register(2, "Example.Foo", StringValue)

    pending.resolve(wrap_named("", StringValue(value="P2")))
    assert (await pending.future).value == "P2"


@pytest.mark.asyncio
async def test_resolve_delivers_decode_error() -> None:
    registry = PendingCallRegistry()
    pending = registry.register(3, "Example.Foo", StringValue)

    pending.resolve(wrap_named_bytes("", b"\x0a\x05ab"))
    with pytest.raises(PayloadDecodeError):
        await pending.future


@pytest.mark.asyncio
async def test_resolve_reports_corrupt_wrapper_as_decode_error() -> None:
    registry = PendingCallRegistry()
    pending = registry.register(4, "Example.Foo", StringValue)

    pending.resolve(b"\xff\xff\xff")
    with pytest.raises(PayloadDecodeError) as exc:
        await pending.future
    assert exc.value.result_type == "google.protobuf.StringValue"
    assert isinstance(exc.value.__cause__, MalformedFrameError)


@pytest.mark.asyncio
async def test_fail_all_empties_and_fails_unresolved() -> None:
    registry = PendingCallRegistry()
    done = registry.register(1, "a", StringValue)
    done.future.set_result(StringValue(value="ok"))
    waiting = [registry.register(seq, "b", StringValue) for seq in (2, 3)]

    assert registry.fail_all(lambda: SessionClosedError("bye")) == 3
    assert len(registry) == 0
    assert done.future.result().value == "ok"
    for pending in waiting:
        with pytest.raises(SessionClosedError):
            await pending.future
