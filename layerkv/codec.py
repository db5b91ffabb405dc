"""
Value Codec

Marshals structured values to and from the raw bytes the stores hold.
Errors raised by json (TypeError for unserializable objects, ValueError
for malformed input) are not caught here.
"""

import json
from typing import Any


class JSONCodec:
    """Compact UTF-8 JSON."""

    def encode(self, obj: Any) -> bytes:
        return json.dumps(obj, separators=(",", ":"), ensure_ascii=False).encode("utf-8")

    def decode(self, data: bytes) -> Any:
        return json.loads(data)
