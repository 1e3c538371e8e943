"""Print every server notification received on a session as JSON lines.

Usage: python -m liqi.scripts.watch wss://host:port/gateway --origin https://game.example --duration 30
"""

from __future__ import annotations

import sys
import asyncio
import argparse

import orjson

from liqi.client import connect
from liqi.errors import ConnectError
from liqi.runtime.logging import configure_logging


def format_notification(name: str, payload: bytes) -> str:
    return orjson.dumps({"name": name, "size": len(payload), "data_hex": payload.hex()}).decode("utf-8")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Watch notifications pushed on a liqi WebSocket session")
    parser.add_argument("endpoint", help="WebSocket URL, e.g. wss://host:port/gateway")
    parser.add_argument("--origin", required=True, help="Origin header presented during the handshake")
    parser.add_argument("--duration", type=float, default=0.0, help="Seconds to watch (0 = until interrupted)")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    return parser.parse_args(argv)


async def _watch(endpoint: str, origin: str, duration: float) -> int:
    try:
        session = await connect(endpoint, origin)
    except ConnectError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    session.notifications.subscribe_all(lambda name, payload: print(format_notification(name, payload), flush=True))
    async with session:
        if duration > 0:
            await asyncio.sleep(duration)
        else:
            while not session.is_closed:
                await asyncio.sleep(1.0)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(args.log_level.upper() if args.log_level else None)
    try:
        return asyncio.run(_watch(args.endpoint, args.origin, args.duration))
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
