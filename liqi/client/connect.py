"""Dial a WebSocket endpoint and start a session on it."""

from __future__ import annotations

import logging

import websockets
from websockets.exceptions import InvalidURI, InvalidHandshake

from liqi.errors import ConnectError
from liqi.state import ClientSettings
from liqi.runtime.settings import load_settings

from .session import Session
from .notifications import NotificationRouter

logger = logging.getLogger(__name__)


def get_ws_options(settings: ClientSettings, origin: str) -> dict[str, object]:
    ws = settings.websocket
    return {
        "origin": origin,
        "open_timeout": ws.open_timeout_s,
        "close_timeout": ws.close_timeout_s,
        "ping_interval": ws.ping_interval_s or None,
        "ping_timeout": ws.ping_timeout_s or None,
        "max_size": ws.max_message_bytes,
    }


async def connect(
    endpoint: str,
    origin: str,
    *,
    settings: ClientSettings | None = None,
    notifications: NotificationRouter | None = None,
) -> Session:
    """Open ``endpoint`` presenting ``origin`` in the handshake and return a started session.

    Raises:
        ConnectError: the URI is invalid, the dial failed or timed out, or the
            server rejected the handshake. No retry is attempted.
    """
    settings = settings or load_settings()
    try:
        ws = await websockets.connect(endpoint, **get_ws_options(settings, origin))
    except (OSError, TimeoutError, InvalidURI, InvalidHandshake) as exc:
        raise ConnectError(endpoint, str(exc) or type(exc).__name__) from exc

    logger.info("connected to %s", endpoint)
    return Session(ws, settings=settings, notifications=notifications).start()


__all__ = ["connect", "get_ws_options"]
