"""Routing of server notifications to subscribed handlers."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable

logger = logging.getLogger(__name__)

NotificationHandler = Callable[[str, bytes], None]


class NotificationRouter:
    """Deliver ``(name, payload)`` pairs to handlers keyed by notification name.

    Payloads are passed undecoded; each handler decodes them with its own schema.
    A handler that raises is logged and does not affect other handlers.
    """

    def __init__(self) -> None:
        self._handlers: defaultdict[str, list[NotificationHandler]] = defaultdict(list)
        self._catch_all: list[NotificationHandler] = []

    def subscribe(self, name: str, handler: NotificationHandler) -> None:
        self._handlers[name].append(handler)

    def subscribe_all(self, handler: NotificationHandler) -> None:
        self._catch_all.append(handler)

    def unsubscribe(self, name: str, handler: NotificationHandler) -> bool:
        handlers = self._handlers.get(name)
        if not handlers or handler not in handlers:
            return False
        handlers.remove(handler)
        if not handlers:
            del self._handlers[name]
        return True

    def unsubscribe_all(self, handler: NotificationHandler) -> bool:
        if handler not in self._catch_all:
            return False
        self._catch_all.remove(handler)
        return True

    def publish(self, name: str, payload: bytes) -> int:
        handlers = [*self._handlers.get(name, ()), *self._catch_all]
        if not handlers:
            logger.debug("no subscriber for notification %s (%d bytes)", name, len(payload))
            return 0
        for handler in handlers:
            try:
                handler(name, payload)
            except Exception:
                logger.exception("notification handler failed for %s", name)
        return len(handlers)


__all__ = ["NotificationHandler", "NotificationRouter"]
