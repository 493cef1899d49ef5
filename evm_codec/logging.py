"""
evm_codec.logging
-----------------

Stdlib logging setup for the command line front-end.

- JSON lines or a concise one-line text format
- Structured fields passed via ``extra={...}`` are rendered in both formats
- bytes render as 0x-hex, everything else non-JSON as ``str()``

The codec functions themselves never log; only the CLI calls `configure`.

Usage
-----
    from evm_codec import logging as clog

    clog.configure(json=False, level="INFO")  # once at process start
    log = clog.get_logger(__name__)
    log.info("encoded", extra={"format": "uint256", "size": 32})
"""

from __future__ import annotations

import datetime as _dt
import json
import logging
import sys
import traceback
from typing import Any, Dict, Optional, TextIO

ROOT_LOGGER = "evm_codec"

# Attributes every LogRecord carries; anything else came in through `extra`.
_RESERVED = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
) | {"message", "asctime", "taskName"}


def _utcnow_iso() -> str:
    return _dt.datetime.now(_dt.timezone.utc).isoformat(timespec="milliseconds")


def _coerce_value(v: Any) -> Any:
    if v is None or isinstance(v, (bool, int, float, str)):
        return v
    if isinstance(v, (bytes, bytearray)):
        return "0x" + bytes(v).hex()
    if isinstance(v, (list, tuple)):
        return [_coerce_value(x) for x in v]
    if isinstance(v, dict):
        return {str(k): _coerce_value(x) for k, x in v.items()}
    return str(v)


def _extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        k: _coerce_value(v)
        for k, v in record.__dict__.items()
        if k not in _RESERVED and not k.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": _utcnow_iso(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k, v in _extras(record).items():
            payload.setdefault(k, v)
        if record.exc_info:
            payload["err"] = "".join(traceback.format_exception(*record.exc_info)).rstrip()
        return json.dumps(payload, separators=(",", ":"))


class TextFormatter(logging.Formatter):
    """
    Human-friendly one-liner:
      2026-01-05T12:34:56.789+00:00 | INFO  | evm_codec.cli | format=uint256 | encoded
    """

    def format(self, record: logging.LogRecord) -> str:
        line = f"{_utcnow_iso()} | {record.levelname:<5} | {record.name}"
        extras = " ".join(f"{k}={v}" for k, v in _extras(record).items())
        if extras:
            line += f" | {extras}"
        line += f" | {record.getMessage()}"
        if record.exc_info:
            line += "\n" + "".join(traceback.format_exception(*record.exc_info)).rstrip()
        return line


_LEVEL_TO_INT = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def _coerce_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return _LEVEL_TO_INT.get(level.upper(), logging.INFO)


def configure(
    *,
    json: bool = False,
    level: str | int = "INFO",
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Re-running replaces the previous handler, so repeated CLI invocations in
    one process (tests) do not stack handlers.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(_coerce_level(level))
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(JSONFormatter() if json else TextFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


__all__ = ["ROOT_LOGGER", "JSONFormatter", "TextFormatter", "configure", "get_logger"]
