"""
EVM word encoding.

A word is exactly 32 bytes, big-endian, left-padded with zeros:

- uint64 word:   24 zero bytes || 8-byte big-endian value
- unsigned word: big-endian magnitude of v in [0, 2**256 - 1]
- signed word:   two's complement of v in [-2**255, 2**255 - 1]; for v < 0
                 the stored magnitude is (MAX_UINT256 + v) + 1

Python ints are unbounded, so every entry point checks its range explicitly
and raises instead of truncating.
"""

from __future__ import annotations

from .constants import EVM_WORD_BYTE_LEN, RANGE, UINT64_MAX
from .errors import FormatError, SignError, WordOverflowError

__all__ = [
    "encode_uint64_word",
    "encode_unsigned_word",
    "encode_signed_word",
    "decode_unsigned_word",
    "decode_signed_word",
]


def _check_int(v: object) -> None:
    # bool is an int subclass, but True is not a quantity.
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError(f"expected int, got {type(v).__name__}")


def _left_pad(n: int) -> bytes:
    return n.to_bytes(EVM_WORD_BYTE_LEN, "big", signed=False)


def encode_uint64_word(v: int) -> bytes:
    _check_int(v)
    if v < 0:
        raise SignError("uint64 cannot be negative", value=v)
    if v > UINT64_MAX:
        raise WordOverflowError(f"Overflow saving uint64 to EVM word: {v}", value=v)
    return bytes(EVM_WORD_BYTE_LEN - 8) + v.to_bytes(8, "big")


def encode_unsigned_word(v: int) -> bytes:
    _check_int(v)
    if v < 0:
        raise SignError(value=v)
    if v > RANGE.max_uint256:
        raise WordOverflowError(f"Overflow saving big int to EVM word: {v}", value=v)
    return _left_pad(v)


def encode_signed_word(v: int) -> bytes:
    _check_int(v)
    if not RANGE.fits_signed(v):
        raise WordOverflowError(f"Overflow saving signed big int to EVM word: {v}", value=v)
    if v >= 0:
        return _left_pad(v)
    return _left_pad((RANGE.max_uint256 + v) + 1)


def _check_word(word: bytes) -> bytes:
    if not isinstance(word, (bytes, bytearray, memoryview)):
        raise TypeError("word must be bytes-like")
    word = bytes(word)
    if len(word) != EVM_WORD_BYTE_LEN:
        raise FormatError(
            f"EVM word must be {EVM_WORD_BYTE_LEN} bytes, got {len(word)}",
            length=len(word),
        )
    return word


def decode_unsigned_word(word: bytes) -> int:
    return int.from_bytes(_check_word(word), "big", signed=False)


def decode_signed_word(word: bytes) -> int:
    return int.from_bytes(_check_word(word), "big", signed=True)
