"""
Format tags and JSON value kinds.

`Format` is the closed set of ABI shapes the transcoder can emit. Strings from
task definitions are matched exactly (case-sensitive) against its values.

`JSONKind` classifies a value as produced by ``json.loads``. Member values are
the kind names used in error messages ("unsupported encoding for value:
Number").
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Union

from .errors import FormatError

__all__ = [
    "JSONValue",
    "Format",
    "JSONKind",
    "json_kind",
    "parse_format",
]

JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]


class Format(str, Enum):
    BYTES = "bytes"
    UINT256 = "uint256"
    INT256 = "int256"
    BOOL = "bool"

    def __str__(self) -> str:
        return self.value


class JSONKind(str, Enum):
    NULL = "Null"
    FALSE = "False"
    NUMBER = "Number"
    STRING = "String"
    TRUE = "True"
    JSON = "JSON"

    def __str__(self) -> str:
        return self.value


def json_kind(value: Any) -> JSONKind:
    if value is None:
        return JSONKind.NULL
    # bool before int: True/False are ints in Python.
    if value is True:
        return JSONKind.TRUE
    if value is False:
        return JSONKind.FALSE
    if isinstance(value, (int, float)):
        return JSONKind.NUMBER
    if isinstance(value, str):
        return JSONKind.STRING
    return JSONKind.JSON


_BY_TAG = {f.value: f for f in Format}


def parse_format(tag: Union[str, Format]) -> Format:
    """Resolve a format tag; anything outside the closed set is a FormatError."""
    if isinstance(tag, Format):
        return tag
    if isinstance(tag, str):
        fmt = _BY_TAG.get(tag)
        if fmt is not None:
            return fmt
    raise FormatError(f"unsupported format: {tag}", format=str(tag))
