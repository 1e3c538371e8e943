"""Inbound frame classification and routing."""

from __future__ import annotations

import logging

from liqi.protocol.kinds import MessageKind
from liqi.protocol.wrapper import unwrap_named
from liqi.protocol.envelope import Envelope, decode_envelope
from liqi.errors import MalformedFrameError, UnmatchedResponseError

from .registry import PendingCallRegistry
from .notifications import NotificationRouter

logger = logging.getLogger(__name__)


class Dispatcher:
    def __init__(self, registry: PendingCallRegistry, notifications: NotificationRouter) -> None:
        self._registry = registry
        self._notifications = notifications

    def dispatch(self, data: bytes) -> None:
        """Route one inbound frame. Never raises for bad input; bad frames are logged and dropped."""
        try:
            envelope = decode_envelope(data)
        except MalformedFrameError as exc:
            logger.warning("dropping malformed frame: %s", exc)
            return

        if envelope.kind is MessageKind.RESPONSE:
            self._handle_response(envelope)
        elif envelope.kind is MessageKind.NOTIFY:
            self._handle_notify(envelope)
        else:
            logger.warning("ignoring request from peer seq=%s (%d bytes)", envelope.sequence, len(envelope.body))

    def _handle_response(self, envelope: Envelope) -> None:
        sequence = envelope.sequence
        if sequence is None:
            logger.warning("dropping response without sequence (%d bytes)", len(envelope.body))
            return
        pending = self._registry.take(sequence)
        if pending is None:
            logger.warning("dropping response: %s", UnmatchedResponseError(sequence))
            return
        if pending.future.cancelled():
            logger.debug("reply for abandoned call %s seq=%s dropped", pending.name, sequence)
            return
        logger.debug("reply for %s seq=%s (%d bytes)", pending.name, sequence, len(envelope.body))
        pending.resolve(envelope.body)

    def _handle_notify(self, envelope: Envelope) -> None:
        try:
            name, payload = unwrap_named(envelope.body)
        except MalformedFrameError as exc:
            logger.warning("dropping malformed notification: %s", exc)
            return
        logger.debug("notification %s (%d bytes)", name, len(payload))
        self._notifications.publish(name, payload)


__all__ = ["Dispatcher"]
