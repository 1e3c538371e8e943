"""Correlation table from sequence number to pending call."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from collections.abc import Callable, Iterator

from liqi.errors import DuplicateSequenceError
from liqi.protocol.wrapper import MessageT

from .pending import PendingCall

logger = logging.getLogger(__name__)


class PendingCallRegistry:
    """Owns every pending call of one session until it is taken or discarded.

    All mutation happens on the event loop thread, and no method awaits between
    lookup and removal, so each operation is atomic with respect to other tasks.
    """

    def __init__(self) -> None:
        self._entries: dict[int, PendingCall[Any]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, sequence: object) -> bool:
        return sequence in self._entries

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._entries))

    def register(self, sequence: int, name: str, result_type: type[MessageT]) -> PendingCall[MessageT]:
        if sequence in self._entries:
            raise DuplicateSequenceError(sequence)
        future: asyncio.Future[MessageT] = asyncio.get_running_loop().create_future()
        pending = PendingCall(sequence=sequence, name=name, result_type=result_type, future=future)
        self._entries[sequence] = pending
        return pending

    def take(self, sequence: int) -> PendingCall[Any] | None:
        return self._entries.pop(sequence, None)

    def discard(self, pending: PendingCall[Any]) -> bool:
        """Remove ``pending`` if it is still the live entry for its sequence."""
        if self._entries.get(pending.sequence) is not pending:
            return False
        del self._entries[pending.sequence]
        return True

    def fail_all(self, make_error: Callable[[], BaseException]) -> int:
        entries = list(self._entries.values())
        self._entries.clear()
        for pending in entries:
            pending.fail(make_error())
        if entries:
            logger.debug("failed %d pending call(s)", len(entries))
        return len(entries)


__all__ = ["PendingCallRegistry"]
