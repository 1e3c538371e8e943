"""A live connection session multiplexing calls and notifications over one WebSocket."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any

from google.protobuf.empty_pb2 import Empty
from google.protobuf.message import Message
from websockets.exceptions import ConnectionClosed

from liqi.state import SessionState, ClientSettings
from liqi.runtime.settings import load_settings
from liqi.protocol.wrapper import MessageT
from liqi.config.protocol import SEQUENCE_MODULUS
from liqi.protocol.envelope import encode_request
from liqi.errors import SendError, CallTimeoutError, SessionClosedError
from liqi.protocol.names import HEARTBEAT_CALL, lobby_method, fast_test_method

from .pending import PendingCall
from .dispatch import Dispatcher
from .heartbeat import HeartbeatLoop
from .registry import PendingCallRegistry
from .notifications import NotificationRouter

logger = logging.getLogger(__name__)


class Session:
    """Client side of one WebSocket connection.

    ``websocket`` is any object with async ``send(bytes)``, ``recv()`` and
    ``close()``; `liqi.client.connect` passes a ``websockets`` client
    connection. Call `start` once to launch the read and heartbeat loops.
    """

    def __init__(
        self,
        websocket: Any,
        *,
        settings: ClientSettings | None = None,
        notifications: NotificationRouter | None = None,
    ) -> None:
        self._ws = websocket
        self._settings = settings or load_settings()
        self.notifications = notifications or NotificationRouter()
        self._registry = PendingCallRegistry()
        self._dispatcher = Dispatcher(self._registry, self.notifications)
        self._heartbeat = HeartbeatLoop(self._send_heartbeat, interval_s=self._settings.heartbeat.interval_s)
        self._write_lock = asyncio.Lock()
        self._closed_event = asyncio.Event()
        self._state = SessionState.OPEN
        self._sequence = 0
        self._read_task: asyncio.Task | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_closed(self) -> bool:
        return self._state is SessionState.CLOSED

    @property
    def registry(self) -> PendingCallRegistry:
        return self._registry

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def last_sequence(self) -> int:
        return self._sequence

    @property
    def is_reading(self) -> bool:
        return self._read_task is not None and not self._read_task.done()

    @property
    def is_heartbeating(self) -> bool:
        return self._heartbeat.is_running

    def start(self) -> Session:
        if self.is_closed:
            raise SessionClosedError("cannot start a closed session")
        if self._read_task is None:
            self._read_task = asyncio.create_task(self._read_loop())
            self._heartbeat.start()
        return self

    async def __aenter__(self) -> Session:
        return self.start()

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _next_sequence(self) -> int:
        self._sequence = (self._sequence + 1) % SEQUENCE_MODULUS
        return self._sequence

    async def _issue(self, name: str, message: Message, result_type: type[MessageT]) -> PendingCall[MessageT]:
        async with self._write_lock:
            if self.is_closed:
                raise SessionClosedError(f"cannot issue {name}: session is closed")
            sequence = self._next_sequence()
            frame = encode_request(sequence, name, message)
            # Armed before the write: the reply can race the end of send().
            pending = self._registry.register(sequence, name, result_type)
            try:
                await self._ws.send(frame)
            except Exception as exc:
                self._registry.discard(pending)
                raise SendError(name, sequence, str(exc) or type(exc).__name__) from exc
        logger.debug("sent %s seq=%s (%d bytes)", name, sequence, len(frame))
        return pending

    async def issue(self, name: str, message: Message, result_type: type[MessageT]) -> asyncio.Future[MessageT]:
        """Send a request and return the future that receives its typed reply.

        The future waits indefinitely; use `call` for the configured timeout.
        """
        pending = await self._issue(name, message, result_type)
        return pending.future

    async def call(
        self,
        name: str,
        message: Message,
        result_type: type[MessageT],
        *,
        timeout: float | None = None,
    ) -> MessageT:
        """Send a request and wait for its reply.

        Raises:
            SendError: the frame could not be written.
            CallTimeoutError: no reply within ``timeout`` (default from settings; 0 waits forever).
            PayloadDecodeError: the reply does not decode as ``result_type``.
            SessionClosedError: the session closed before or while waiting.
        """
        timeout_s = self._settings.calls.timeout_s if timeout is None else float(timeout)
        pending = await self._issue(name, message, result_type)
        try:
            if timeout_s <= 0:
                return await pending.future
            return await asyncio.wait_for(pending.future, timeout=timeout_s)
        except TimeoutError as exc:
            raise CallTimeoutError(name, pending.sequence, timeout_s) from exc
        finally:
            if pending.future.cancelled():
                self._registry.discard(pending)

    async def call_lobby(
        self,
        method: str,
        message: Message,
        result_type: type[MessageT],
        *,
        timeout: float | None = None,
    ) -> MessageT:
        return await self.call(lobby_method(method), message, result_type, timeout=timeout)

    async def call_fast_test(
        self,
        method: str,
        message: Message,
        result_type: type[MessageT],
        *,
        timeout: float | None = None,
    ) -> MessageT:
        return await self.call(fast_test_method(method), message, result_type, timeout=timeout)

    async def _send_heartbeat(self) -> None:
        await self.call(HEARTBEAT_CALL, Empty(), Empty)

    async def _read_loop(self) -> None:
        max_errors = self._settings.websocket.max_read_errors
        consecutive_errors = 0
        reason = "read loop exited"
        while not self.is_closed:
            try:
                data = await self._ws.recv()
            except asyncio.CancelledError:
                raise
            except ConnectionClosed as exc:
                if self.is_closed:
                    return
                code = exc.rcvd.code if exc.rcvd is not None else None
                reason = f"connection closed by peer (code={code})"
                break
            except Exception as exc:
                if self.is_closed:
                    return
                consecutive_errors += 1
                logger.warning("read failed (%d consecutive): %s", consecutive_errors, exc)
                if max_errors and consecutive_errors >= max_errors:
                    reason = f"{consecutive_errors} consecutive read errors"
                    break
                continue

            consecutive_errors = 0
            if isinstance(data, str):
                logger.warning("dropping text message (%d chars); expected binary frames", len(data))
                continue
            self._dispatcher.dispatch(data)

        if not self.is_closed:
            await self._shutdown(reason)

    async def close(self) -> None:
        """Close the session. Safe to call more than once."""
        await self._shutdown("closed by client")

    async def _shutdown(self, reason: str) -> None:
        if self.is_closed:
            await self._closed_event.wait()
            return
        self._state = SessionState.CLOSED
        logger.info("closing session: %s (pending=%d)", reason, len(self._registry))

        read_task = self._read_task
        if read_task is asyncio.current_task():
            read_task = None
        try:
            await self._heartbeat.stop()
            with contextlib.suppress(Exception):
                await self._ws.close()
            if read_task is not None:
                done, _ = await asyncio.wait({read_task}, timeout=self._settings.websocket.close_timeout_s)
                if not done:
                    read_task.cancel()
                    await asyncio.wait({read_task})
        finally:
            # Runs even when the closing caller is cancelled mid-teardown.
            if read_task is not None and not read_task.done():
                read_task.cancel()
            self._registry.fail_all(lambda: SessionClosedError(f"session closed: {reason}"))
            self._closed_event.set()


__all__ = ["Session"]
