"""
evm_codec
=========

Encode loosely typed JSON values as EVM call arguments.

This package provides:
  • 32-byte word encoders for uint64, uint256 and two's-complement int256.
  • A JSON transcoder for the four supported shapes: bytes, uint256, int256, bool.
  • "0x" prefix helpers and ordered byte concatenation.

Everything here is pure-Python, deterministic and side-effect free. The
`evm-codec` command line tool lives in evm_codec.cli.

Quick start:
    >>> from evm_codec import transcode_with_format
    >>> transcode_with_format("0x1a", "uint256")[-1]
    26
"""

from __future__ import annotations

from .buffers import concat, concat_into
from .constants import (EVM_WORD_BYTE_LEN, EVM_WORD_HEX_LEN, MAX_INT256,
                        MAX_UINT256, MIN_INT256, RANGE, RangeConstants)
from .errors import (CodecError, CodecErrorCode, FormatError,
                     InputTooLargeError, ParseError, SignError,
                     WordOverflowError)
from .hexutil import add_hex_prefix, has_hex_prefix, remove_hex_prefix
from .transcode import (transcode_bool, transcode_bytes, transcode_int256,
                        transcode_json, transcode_uint256,
                        transcode_with_format)
from .types import Format, JSONKind, json_kind
from .version import __version__
from .words import (decode_signed_word, decode_unsigned_word,
                    encode_signed_word, encode_uint64_word,
                    encode_unsigned_word)

__all__ = [
    "__version__",
    # constants
    "EVM_WORD_BYTE_LEN",
    "EVM_WORD_HEX_LEN",
    "MAX_UINT256",
    "MAX_INT256",
    "MIN_INT256",
    "RANGE",
    "RangeConstants",
    # words
    "encode_uint64_word",
    "encode_unsigned_word",
    "encode_signed_word",
    "decode_unsigned_word",
    "decode_signed_word",
    # buffers / hex
    "concat",
    "concat_into",
    "has_hex_prefix",
    "remove_hex_prefix",
    "add_hex_prefix",
    # transcoding
    "Format",
    "JSONKind",
    "json_kind",
    "transcode_bytes",
    "transcode_bool",
    "transcode_uint256",
    "transcode_int256",
    "transcode_with_format",
    "transcode_json",
    # errors
    "CodecError",
    "CodecErrorCode",
    "FormatError",
    "ParseError",
    "WordOverflowError",
    "SignError",
    "InputTooLargeError",
]
