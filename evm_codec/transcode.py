"""
JSON → EVM transcoding.

Turns a parsed JSON value plus a format tag into the bytes a contract call
expects. Four shapes are supported (see `evm_codec.types.Format`):

- bool:     one word, 0 or 1. Truthiness follows the JSON kind: non-zero
            numbers, non-empty strings and `true` are true; `false` and
            `null` are false.
- uint256:  one unsigned word. Strings are base 16 when they carry a
            lowercase "0x" prefix, base 10 otherwise; `null` is 0.
- int256:   one two's-complement word, same string rules.
- bytes:    dynamic encoding, laid out as

                offset word (always 64) || length word || content || padding

            where padding is 32 - (len % 32) zero bytes. A content length
            that is already a multiple of 32 therefore gets a full zero word.
            Booleans and numbers are carried as a single 32-byte word.

JSON numbers are IEEE-754 doubles upstream; they are truncated toward zero
and narrowed to 64 bits before being widened to a word, so integers above
2**53 lose precision exactly as they would in any double-based JSON reader.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any, Callable, Dict, Optional, Union

from .buffers import concat
from .config import load_config
from .constants import EVM_WORD_BYTE_LEN, EVM_WORD_HEX_LEN, INT64_MAX, INT64_MIN, UINT64_MAX
from .errors import FormatError, InputTooLargeError, ParseError, WordOverflowError
from .hexutil import has_hex_prefix, remove_hex_prefix
from .types import Format, JSONKind, json_kind, parse_format
from .words import encode_signed_word, encode_uint64_word, encode_unsigned_word

__all__ = [
    "parse_big_int",
    "transcode_bytes",
    "transcode_bool",
    "transcode_uint256",
    "transcode_int256",
    "transcode_with_format",
    "transcode_json",
]

_HEX_RE = re.compile(r"[+-]?[0-9a-fA-F]+")
_DEC_RE = re.compile(r"[+-]?[0-9]+")


# ──────────────────────────────────────────────────────────────────────────────
# Value parsing
# ──────────────────────────────────────────────────────────────────────────────


def parse_big_int(s: str) -> int:
    """
    Parse a numeric string: base 16 after a lowercase "0x", base 10 otherwise.

    Only an optional sign and ASCII digits are accepted; whitespace,
    underscores and nested prefixes are rejected.
    """
    if has_hex_prefix(s):
        body, pattern, base = remove_hex_prefix(s), _HEX_RE, 16
    else:
        body, pattern, base = s, _DEC_RE, 10
    if pattern.fullmatch(body) is None:
        raise ParseError(f"error parsing {s}", input=s)
    return int(body, base)


def _number_to_int(value: Union[int, float], *, lo: Optional[int], hi: int) -> int:
    try:
        f = float(value)
    except OverflowError:
        raise WordOverflowError(f"number out of 64-bit range: {value}", value=value) from None
    if math.isnan(f):
        raise ParseError("error parsing NaN", input="NaN")
    if math.isinf(f):
        raise WordOverflowError(f"number out of 64-bit range: {f}", value=str(f))
    n = math.trunc(f)
    if (lo is not None and n < lo) or n > hi:
        raise WordOverflowError(f"number out of 64-bit range: {value}", value=n)
    return n


def _as_int64(value: Union[int, float]) -> int:
    return _number_to_int(value, lo=INT64_MIN, hi=INT64_MAX)


def _as_uint64(value: Union[int, float]) -> int:
    # Negatives pass through so the word encoder reports them as a SignError.
    return _number_to_int(value, lo=None, hi=UINT64_MAX)


def _unsupported(value: Any) -> FormatError:
    kind = json_kind(value)
    return FormatError(f"unsupported encoding for value: {kind}", kind=kind.value)


# ──────────────────────────────────────────────────────────────────────────────
# Per-format paths
# ──────────────────────────────────────────────────────────────────────────────


def transcode_bytes(value: Any) -> bytes:
    offset = encode_uint64_word(EVM_WORD_HEX_LEN)
    kind = json_kind(value)

    if kind is JSONKind.STRING:
        try:
            content = value.encode("utf-8")
        except UnicodeEncodeError as e:
            # json.loads accepts escaped lone surrogates ("\ud800").
            raise ParseError(f"string is not valid UTF-8: {e.reason}", input=value) from e
        length = len(content)
        return concat(
            [
                offset,
                encode_uint64_word(length),
                content,
                bytes(EVM_WORD_BYTE_LEN - (length % EVM_WORD_BYTE_LEN)),
            ]
        )

    if kind is JSONKind.FALSE or kind is JSONKind.TRUE:
        return concat(
            [
                offset,
                encode_uint64_word(EVM_WORD_BYTE_LEN),
                encode_uint64_word(1 if value else 0),
            ]
        )

    if kind is JSONKind.NUMBER:
        return concat(
            [
                offset,
                encode_uint64_word(EVM_WORD_BYTE_LEN),
                encode_signed_word(_as_int64(value)),
            ]
        )

    raise _unsupported(value)


def transcode_bool(value: Any) -> bytes:
    kind = json_kind(value)
    if kind is JSONKind.NUMBER:
        out = value != 0
    elif kind is JSONKind.STRING:
        out = len(value) > 0
    elif kind is JSONKind.TRUE:
        out = True
    elif kind is JSONKind.FALSE or kind is JSONKind.NULL:
        out = False
    else:
        raise _unsupported(value)
    return encode_uint64_word(1 if out else 0)


def transcode_uint256(value: Any) -> bytes:
    kind = json_kind(value)
    if kind is JSONKind.STRING:
        n = parse_big_int(value)
    elif kind is JSONKind.NUMBER:
        n = _as_uint64(value)
    elif kind is JSONKind.NULL:
        n = 0
    else:
        raise _unsupported(value)
    return encode_unsigned_word(n)


def transcode_int256(value: Any) -> bytes:
    kind = json_kind(value)
    if kind is JSONKind.STRING:
        n = parse_big_int(value)
    elif kind is JSONKind.NUMBER:
        n = _as_int64(value)
    elif kind is JSONKind.NULL:
        n = 0
    else:
        raise _unsupported(value)
    return encode_signed_word(n)


# ──────────────────────────────────────────────────────────────────────────────
# Dispatch
# ──────────────────────────────────────────────────────────────────────────────

TRANSCODERS: Dict[Format, Callable[[Any], bytes]] = {
    Format.BYTES: transcode_bytes,
    Format.UINT256: transcode_uint256,
    Format.INT256: transcode_int256,
    Format.BOOL: transcode_bool,
}


def transcode_with_format(value: Any, fmt: Union[Format, str]) -> bytes:
    """Encode `value` according to `fmt` ("bytes", "uint256", "int256", "bool")."""
    return TRANSCODERS[parse_format(fmt)](value)


def _reject_constant(name: str) -> Any:
    raise ParseError(f"error parsing {name}", input=name)


def transcode_json(
    raw: Union[str, bytes, bytearray],
    fmt: Union[Format, str],
    *,
    max_bytes: Optional[int] = None,
    allow_nan: Optional[bool] = None,
) -> bytes:
    """
    Parse raw JSON text and transcode the resulting value.

    Limits default to the process configuration (see evm_codec.config).
    """
    cfg = load_config()
    limit = cfg.max_input_bytes if max_bytes is None else max_bytes
    nan_ok = cfg.allow_nan if allow_nan is None else allow_nan

    if isinstance(raw, (bytes, bytearray)):
        size = len(raw)
        if size > limit:
            raise InputTooLargeError(size, limit)
        try:
            text = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"invalid UTF-8 in JSON input: {e.reason}") from e
    else:
        text = raw
        try:
            size = len(text.encode("utf-8"))
        except UnicodeEncodeError as e:
            raise ParseError(f"invalid UTF-8 in JSON input: {e.reason}", input=text[:96]) from e
        if size > limit:
            raise InputTooLargeError(size, limit)

    fmt = parse_format(fmt)
    try:
        if nan_ok:
            value = json.loads(text)
        else:
            value = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(f"invalid JSON: {e.msg}", input=text[:96]) from e
    return transcode_with_format(value, fmt)
