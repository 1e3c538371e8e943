from __future__ import annotations

import asyncio
from dataclasses import replace
from collections.abc import Callable

import pytest
from google.protobuf.message import Message
from websockets.exceptions import ConnectionClosedOK

from liqi.client import Session
from liqi.runtime.settings import load_settings
from liqi.protocol import (
    MessageKind,
    wrap_named,
    unwrap_named,
    encode_envelope,
    decode_envelope,
    wrap_named_bytes,
)

_CLOSE = object()


class FakeWebSocket:
    """In-memory stand-in for a websockets client connection.

    Frames the client sends are kept in ``sent``; frames queued with ``feed``
    (or the ``reply``/``notify`` helpers) are returned by ``recv``.
    """

    def __init__(self) -> None:
        self.sent: list[bytes] = []
        self.send_attempts = 0
        self.send_error: BaseException | None = None
        self.on_send: Callable[[object], None] | None = None
        self.closed = False
        self.close_calls = 0
        self._inbox: asyncio.Queue[object] = asyncio.Queue()

    async def send(self, data: bytes) -> None:
        self.send_attempts += 1
        if self.send_error is not None:
            raise self.send_error
        if self.closed:
            raise ConnectionClosedOK(None, None)
        self.sent.append(bytes(data))
        if self.on_send is not None:
            self.on_send(decode_envelope(data))

    async def recv(self) -> object:
        item = await self._inbox.get()
        if item is _CLOSE:
            self.closed = True
            raise ConnectionClosedOK(None, None)
        if isinstance(item, BaseException):
            raise item
        return item

    async def close(self) -> None:
        self.close_calls += 1
        self.closed = True
        self._inbox.put_nowait(_CLOSE)

    def feed(self, data: bytes | str) -> None:
        self._inbox.put_nowait(data)

    def feed_error(self, exc: BaseException) -> None:
        self._inbox.put_nowait(exc)

    def peer_close(self) -> None:
        self._inbox.put_nowait(_CLOSE)

    def requests(self) -> list[tuple[int, str, bytes]]:
        """Decode every sent frame into ``(sequence, name, payload)``."""
        out = []
        for frame in self.sent:
            envelope = decode_envelope(frame)
            name, payload = unwrap_named(envelope.body)
            out.append((envelope.sequence, name, payload))
        return out

    def reply(self, sequence: int, message: Message, *, name: str = "") -> None:
        self.feed(encode_envelope(MessageKind.RESPONSE, wrap_named(name, message), sequence))

    def reply_raw(self, sequence: int, payload: bytes) -> None:
        self.feed(encode_envelope(MessageKind.RESPONSE, wrap_named_bytes("", payload), sequence))

    def notify(self, name: str, message: Message) -> None:
        self.feed(encode_envelope(MessageKind.NOTIFY, wrap_named(name, message)))


@pytest.fixture
def fake_ws() -> FakeWebSocket:
    return FakeWebSocket()


@pytest.fixture
def settings():
    base = load_settings()
    return replace(
        base,
        calls=replace(base.calls, timeout_s=1.0),
        heartbeat=replace(base.heartbeat, interval_s=0.0),
        websocket=replace(base.websocket, close_timeout_s=1.0, max_read_errors=3),
    )


@pytest.fixture
def make_session(fake_ws: FakeWebSocket, settings):
    def _make(ws: FakeWebSocket | None = None, **overrides):
        cfg = settings
        if "heartbeat_interval_s" in overrides:
            cfg = replace(cfg, heartbeat=replace(cfg.heartbeat, interval_s=overrides.pop("heartbeat_interval_s")))
        if "call_timeout_s" in overrides:
            cfg = replace(cfg, calls=replace(cfg.calls, timeout_s=overrides.pop("call_timeout_s")))
        if overrides:
            raise TypeError(f"unknown overrides: {sorted(overrides)}")
        return Session(ws or fake_ws, settings=cfg)

    return _make
