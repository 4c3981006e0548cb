"""Compact string codec for embedding a JSON payload in a report page.

The payload is serialized to compact JSON, compressed with raw deflate
(no zlib header or trailer, ``wbits=-15``) and written out as the
comma-separated decimal values of the compressed bytes::

    encode({"a": 1})  ->  "171,86,74,84,...,5,0"

Digits and commas survive inside a single-quoted script literal without
escaping, and a browser can rebuild the bytes with
``new Uint8Array(str.split(','))`` before inflating them.
"""

import json
import logging
import re
import zlib
from typing import Any

from .exceptions import DecodeError, EncodeError

logger = logging.getLogger(__name__)

RAW_DEFLATE_WBITS = -15
SEPARATOR = ","

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def encode(payload: Any, level: int = 9) -> str:
    """Encode a JSON-serializable payload into a comma-separated byte string.

    Raises:
        EncodeError: If the payload is not JSON-serializable (this includes
            NaN and infinite floats, which JSON cannot represent).
    """
    try:
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise EncodeError(str(e)) from e

    # Surrogates only occur inside string literals; UTF-8 cannot carry them raw
    text = _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)

    compressor = zlib.compressobj(level, zlib.DEFLATED, RAW_DEFLATE_WBITS)
    compressed = compressor.compress(text.encode("utf-8")) + compressor.flush()

    logger.debug("Encoded payload: %d JSON bytes -> %d deflated bytes", len(text), len(compressed))
    return SEPARATOR.join(str(b) for b in compressed)


def decode(text: str) -> Any:
    """Decode a string produced by :func:`encode` back into its JSON value.

    Raises:
        DecodeError: On empty input, non-byte tokens, a truncated or corrupt
            deflate stream, trailing data, or invalid UTF-8/JSON content.
    """
    data = _to_bytes(text)

    decompressor = zlib.decompressobj(RAW_DEFLATE_WBITS)
    try:
        raw = decompressor.decompress(data) + decompressor.flush()
    except zlib.error as e:
        raise DecodeError(f"corrupt deflate stream: {e}") from e

    if not decompressor.eof:
        raise DecodeError("truncated deflate stream")
    if decompressor.unused_data:
        raise DecodeError(f"{len(decompressor.unused_data)} unexpected trailing bytes")

    try:
        return json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise DecodeError(f"payload is not UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise DecodeError(f"payload is not JSON: {e}") from e


def _to_bytes(text: str) -> bytes:
    if not isinstance(text, str):
        raise DecodeError(f"expected str, got {type(text).__name__}")

    stripped = text.strip()
    if not stripped:
        raise DecodeError("empty payload")

    values = []
    for position, token in enumerate(stripped.split(SEPARATOR)):
        token = token.strip()
        if not (token.isascii() and token.isdigit()):
            raise DecodeError(f"token {position} is not a byte value: {token!r}")
        value = int(token)
        if value > 255:
            raise DecodeError(f"token {position} is out of byte range: {value}")
        values.append(value)

    return bytes(values)
