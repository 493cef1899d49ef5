"""
evm_codec.constants
===================

Word geometry and 256-bit integer bounds shared by every encoder.

The bounds are computed once, at import, into a frozen ``RangeConstants``
instance (``RANGE``). They are immutable and process-wide; nothing ever
rebinds or tears them down, so concurrent readers need no locking.

Examples
--------
>>> RANGE.max_uint256 == 2**256 - 1
True
>>> RANGE.min_int256 == -(2**255)
True
"""

from __future__ import annotations

from dataclasses import dataclass

# Size of an EVM word in bytes, and of its hex rendering in digits.
EVM_WORD_BYTE_LEN: int = 32
EVM_WORD_HEX_LEN: int = EVM_WORD_BYTE_LEN * 2

WORD_BITS: int = 8 * EVM_WORD_BYTE_LEN

# JSON numbers are narrowed to 64 bits before widening to a word.
UINT64_MAX: int = (1 << 64) - 1
INT64_MIN: int = -(1 << 63)
INT64_MAX: int = (1 << 63) - 1


@dataclass(frozen=True)
class RangeConstants:
    max_uint256: int
    max_int256: int
    min_int256: int

    @classmethod
    def for_bits(cls, bits: int) -> "RangeConstants":
        max_uint = (1 << bits) - 1
        return cls(
            max_uint256=max_uint,
            max_int256=max_uint >> 1,
            min_int256=-(1 << (bits - 1)),
        )

    def fits_unsigned(self, v: int) -> bool:
        return 0 <= v <= self.max_uint256

    def fits_signed(self, v: int) -> bool:
        return self.min_int256 <= v <= self.max_int256


RANGE: RangeConstants = RangeConstants.for_bits(WORD_BITS)

MAX_UINT256: int = RANGE.max_uint256
MAX_INT256: int = RANGE.max_int256
MIN_INT256: int = RANGE.min_int256

__all__ = [
    "EVM_WORD_BYTE_LEN",
    "EVM_WORD_HEX_LEN",
    "WORD_BITS",
    "UINT64_MAX",
    "INT64_MIN",
    "INT64_MAX",
    "RangeConstants",
    "RANGE",
    "MAX_UINT256",
    "MAX_INT256",
    "MIN_INT256",
]
