from .kinds import MessageKind
from .envelope import Envelope, decode_envelope, encode_envelope, encode_request
from .names import HEARTBEAT_CALL, lobby_method, method_name, fast_test_method
from .wrapper import Wrapper, wrap_named, unwrap_named, decode_payload, wrap_named_bytes

__all__ = [
    "HEARTBEAT_CALL",
    "Envelope",
    "MessageKind",
    "Wrapper",
    "decode_envelope",
    "decode_payload",
    "encode_envelope",
    "encode_request",
    "fast_test_method",
    "lobby_method",
    "method_name",
    "unwrap_named",
    "wrap_named",
    "wrap_named_bytes",
]
