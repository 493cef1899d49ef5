"""
evm_codec.config — logging defaults and input caps, read from the environment.

Safe to import very early: stdlib only, no side effects beyond reading
os.environ once (the result is cached).

Configuration precedence:
  1) Environment variables (EVM_CODEC_*)
  2) Hardcoded safe defaults below

Key env vars (case-insensitive where boolean):
  - EVM_CODEC_LOG_LEVEL        (str)    default: INFO
  - EVM_CODEC_LOG_FORMAT       (str)    default: text      (text|json)
  - EVM_CODEC_MAX_INPUT_BYTES  (int)    default: 1_048_576 (clamped to 1 KiB..64 MiB)
  - EVM_CODEC_ALLOW_NAN        (bool)   default: false

Usage:
    from evm_codec.config import load_config
    CFG = load_config()
    if CFG.allow_nan: ...

Tests that tweak the environment call `load_config.cache_clear()`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_LOG_FORMATS = ("text", "json")


# ----------------------------- helpers ---------------------------------------


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "t", "yes", "y", "on")


def _env_int(name: str, default: int, *, min_v: int, max_v: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        v = int(raw, 0)
    except ValueError:
        return default
    return max(min_v, min(max_v, v))


def _env_choice(name: str, default: str, choices: tuple[str, ...], *, upper: bool = False) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().upper() if upper else raw.strip().lower()
    return val if val in choices else default


# ------------------------------- config --------------------------------------


@dataclass(frozen=True)
class CodecConfig:
    log_level: str
    log_format: str
    max_input_bytes: int
    allow_nan: bool

    @property
    def log_json(self) -> bool:
        return self.log_format == "json"

    def as_dict(self) -> Dict[str, Any]:
        return {
            "log_level": self.log_level,
            "log_format": self.log_format,
            "max_input_bytes": self.max_input_bytes,
            "allow_nan": self.allow_nan,
        }


@lru_cache(maxsize=1)
def load_config() -> CodecConfig:
    """
    Build and cache a CodecConfig from environment + safe defaults.
    """
    return CodecConfig(
        log_level=_env_choice("EVM_CODEC_LOG_LEVEL", "INFO", _LOG_LEVELS, upper=True),
        log_format=_env_choice("EVM_CODEC_LOG_FORMAT", "text", _LOG_FORMATS),
        max_input_bytes=_env_int(
            "EVM_CODEC_MAX_INPUT_BYTES", 1_048_576, min_v=1_024, max_v=67_108_864
        ),
        allow_nan=_env_bool("EVM_CODEC_ALLOW_NAN", False),
    )


# Import-time snapshot only: it is not refreshed by load_config.cache_clear().
# Package code reads load_config() so environment changes are picked up.
CFG: CodecConfig = load_config()

__all__ = ["CodecConfig", "load_config", "CFG"]
