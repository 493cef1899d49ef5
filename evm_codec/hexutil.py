"""
evm_codec.hexutil
=================

"0x" prefix handling for string inputs, plus the two hex helpers the CLI needs.

Recognition is deliberately asymmetric:

- `has_hex_prefix` / `remove_hex_prefix` only recognize a lowercase "0x".
  "0X1A" is *not* hex to the transcoder and falls through to base-10 parsing.
- `add_hex_prefix` leaves either case alone and only ever adds "0x".

Examples
--------
>>> has_hex_prefix("0xFF"), has_hex_prefix("0XFF")
(True, False)
>>> remove_hex_prefix("0xFF")
'FF'
>>> add_hex_prefix("FF"), add_hex_prefix("0xFF"), add_hex_prefix("0XFF")
('0xFF', '0xFF', '0XFF')
"""

from __future__ import annotations

from typing import Union

from .errors import ParseError

BytesLike = Union[bytes, bytearray, memoryview]

HEX_PREFIX = "0x"


def has_hex_prefix(s: str) -> bool:
    return len(s) >= 2 and s[0] == "0" and s[1] == "x"


def remove_hex_prefix(s: str) -> str:
    if has_hex_prefix(s):
        return s[2:]
    return s


def add_hex_prefix(s: str) -> str:
    if len(s) < 2 or s[:2].lower() != HEX_PREFIX:
        return HEX_PREFIX + s
    return s


def to_hex(data: BytesLike) -> str:
    """Return lowercase, 0x-prefixed hex of data."""
    if isinstance(data, memoryview):
        data = data.tobytes()
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("to_hex expects bytes-like")
    return HEX_PREFIX + bytes(data).hex()


def from_hex(s: str) -> bytes:
    """Parse hex with or without a 0x/0X prefix; odd lengths get a leading zero."""
    if not isinstance(s, str):
        raise TypeError("from_hex expects str")
    h = s.strip()
    if h[:2] in ("0x", "0X"):
        h = h[2:]
    if len(h) % 2 == 1:
        h = "0" + h
    try:
        return bytes.fromhex(h)
    except ValueError as e:
        raise ParseError(f"invalid hex string: {s}", input=s) from e


__all__ = [
    "BytesLike",
    "HEX_PREFIX",
    "has_hex_prefix",
    "remove_hex_prefix",
    "add_hex_prefix",
    "to_hex",
    "from_hex",
]
