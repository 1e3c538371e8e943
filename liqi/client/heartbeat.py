"""Periodic keepalive calls for a live session."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from collections.abc import Callable, Awaitable

logger = logging.getLogger(__name__)


class HeartbeatLoop:
    def __init__(self, beat: Callable[[], Awaitable[object]], *, interval_s: float) -> None:
        self._beat = beat
        self._interval_s = float(interval_s)
        self._stop_event = asyncio.Event()
        self._task: asyncio.Task | None = None
        self.beats = 0
        self.failures = 0

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task | None:
        if self._interval_s <= 0:
            return None
        if self._task is None:
            self._task = asyncio.create_task(self._heartbeat_loop())
        return self._task

    async def stop(self) -> None:
        self._stop_event.set()
        if self._task is None:
            return
        if self._task is not asyncio.current_task():
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await self._task
        self._task = None

    async def _wait_interval(self) -> bool:
        with contextlib.suppress(TimeoutError):
            await asyncio.wait_for(self._stop_event.wait(), timeout=self._interval_s)
        return self._stop_event.is_set()

    async def _heartbeat_loop(self) -> None:
        try:
            while not self._stop_event.is_set():
                try:
                    await self._beat()
                    self.beats += 1
                except asyncio.CancelledError:
                    raise
                except Exception as exc:
                    if self._stop_event.is_set():
                        break
                    self.failures += 1
                    logger.warning("heartbeat failed: %s", exc)
                if await self._wait_interval():
                    break
        except asyncio.CancelledError:
            return


__all__ = ["HeartbeatLoop"]
