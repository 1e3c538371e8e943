"""Method naming helpers (``.lq.<Service>.<method>``)."""

from __future__ import annotations

from liqi.config.protocol import METHOD_PREFIX, SERVICE_LOBBY, HEARTBEAT_METHOD, SERVICE_FAST_TEST


def method_name(service: str, method: str) -> str:
    service = service.strip().strip(".")
    method = method.strip().strip(".")
    if not service or not method:
        raise ValueError("service and method must be non-empty")
    return f"{METHOD_PREFIX}{service}.{method}"


def lobby_method(method: str) -> str:
    return method_name(SERVICE_LOBBY, method)


def fast_test_method(method: str) -> str:
    return method_name(SERVICE_FAST_TEST, method)


HEARTBEAT_CALL = lobby_method(HEARTBEAT_METHOD)

__all__ = ["HEARTBEAT_CALL", "fast_test_method", "lobby_method", "method_name"]
