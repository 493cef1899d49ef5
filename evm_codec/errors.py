"""
evm_codec.errors
----------------

Error taxonomy for the codec.

- One root `CodecError` with a machine-friendly `code` and optional `data`.
- One subclass per failure family (format, parse, overflow, sign, limit).
- Each subclass also derives from the matching builtin (ValueError or
  OverflowError) so callers that only know the builtins still catch them.
- `to_dict()` gives a JSON-safe shape for CLI output and upstream bridges.

Every failure is a deterministic function of the input; none is retryable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping


class CodecErrorCode(str, Enum):
    FORMAT = "CODEC/FORMAT"
    PARSE = "CODEC/PARSE"
    OVERFLOW = "CODEC/OVERFLOW"
    SIGN = "CODEC/SIGN"
    LIMIT = "CODEC/LIMIT"


@dataclass(eq=False)
class CodecError(Exception):
    """
    Root error for the codec.

    Attributes
    ----------
    code: str
        Machine-stable error code (see CodecErrorCode).
    message: str
        Human hint, safe to print.
    data: dict
        JSON-serializable details (offending input, bounds, kinds).
    retryable: bool
        Always False for codec errors; kept for uniform reporting.
    """

    code: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)
    retryable: bool = False

    def __post_init__(self) -> None:
        self.code = str(getattr(self.code, "value", self.code))
        super().__init__(self.message)

    def with_context(self, **ctx: Any) -> "CodecError":
        """Return a copy with extra context merged into `data`."""
        err = self.__class__.__new__(self.__class__)
        err.__dict__.update(self.__dict__)
        err.data = {**self.data, **_jsonmap(ctx)}
        Exception.__init__(err, *self.args)
        return err

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "data": _jsonmap(self.data),
            "retryable": self.retryable,
        }

    def __str__(self) -> str:
        return self.message


class FormatError(CodecError, ValueError):
    """Unknown format tag, or a JSON kind the selected path cannot encode."""

    def __init__(self, message: str = "unsupported format", **data: Any) -> None:
        super().__init__(code=CodecErrorCode.FORMAT, message=message, data=_jsonmap(data))


class ParseError(CodecError, ValueError):
    """Malformed decimal or hex string; `data["input"]` holds the offender."""

    def __init__(self, message: str = "parse error", **data: Any) -> None:
        super().__init__(code=CodecErrorCode.PARSE, message=message, data=_jsonmap(data))

    @property
    def input(self) -> Any:
        return self.data.get("input")


class WordOverflowError(CodecError, OverflowError):
    def __init__(self, message: str = "value does not fit in an EVM word", **data: Any) -> None:
        super().__init__(code=CodecErrorCode.OVERFLOW, message=message, data=_jsonmap(data))


class SignError(CodecError, ValueError):
    def __init__(self, message: str = "Uint256 cannot be negative", **data: Any) -> None:
        super().__init__(code=CodecErrorCode.SIGN, message=message, data=_jsonmap(data))


class InputTooLargeError(CodecError, ValueError):
    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            code=CodecErrorCode.LIMIT,
            message=f"input of {size} bytes exceeds limit of {limit} bytes",
            data={"size": size, "limit": limit},
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _jsonmap(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: _coerce_json(v) for k, v in data.items()}


def _coerce_json(v: Any) -> Any:
    # Big ints survive JSON but not every consumer; render them as decimal text.
    if isinstance(v, bool) or v is None or isinstance(v, (float, str)):
        return v
    if isinstance(v, int):
        return v if -(1 << 53) <= v <= (1 << 53) else str(v)
    if isinstance(v, (bytes, bytearray)):
        return "0x" + bytes(v).hex()
    if isinstance(v, (list, tuple)):
        return [_coerce_json(x) for x in v]
    if isinstance(v, dict):
        return {str(k): _coerce_json(x) for k, x in v.items()}
    return str(v)


__all__ = [
    "CodecErrorCode",
    "CodecError",
    "FormatError",
    "ParseError",
    "WordOverflowError",
    "SignError",
    "InputTooLargeError",
]
