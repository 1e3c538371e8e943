"""A single in-flight call awaiting its reply."""

from __future__ import annotations

import asyncio
from typing import Generic
from dataclasses import dataclass

from liqi.errors import MalformedFrameError, PayloadDecodeError
from liqi.protocol.wrapper import MessageT, unwrap_named, decode_payload


@dataclass(slots=True)
class PendingCall(Generic[MessageT]):
    sequence: int
    name: str
    result_type: type[MessageT]
    future: asyncio.Future[MessageT]

    def resolve(self, body: bytes) -> None:
        """Decode a response body as ``result_type`` and settle the future.

        Decode failures are delivered to the caller as `PayloadDecodeError`
        instead of raised here.
        """
        if self.future.done():
            return
        try:
            _, payload = unwrap_named(body)
            result = decode_payload(payload, self.result_type)
        except MalformedFrameError as exc:
            error = PayloadDecodeError(self.result_type.DESCRIPTOR.full_name, str(exc))
            error.__cause__ = exc
            self.future.set_exception(error)
            return
        except Exception as exc:
            self.future.set_exception(exc)
            return
        self.future.set_result(result)

    def fail(self, exc: BaseException) -> None:
        if not self.future.done():
            self.future.set_exception(exc)


__all__ = ["PendingCall"]
