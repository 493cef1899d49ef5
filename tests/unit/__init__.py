"""
tests.unit
==========

Small shared helpers for unit-test modules:

    from tests.unit import word, read_json_fixture

Paths
-----
- Repository root is inferred relative to this file.
- Fixtures live under `tests/fixtures/`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

# tests/unit/__init__.py -> tests -> <root>
ROOT: Path = Path(__file__).resolve().parents[2]
FIXTURES: Path = ROOT / "tests" / "fixtures"

__all__ = [
    "ROOT",
    "FIXTURES",
    "word",
    "signed_word",
    "read_json_fixture",
]


def word(n: int) -> bytes:
    """Expected 32-byte big-endian word for a non-negative int."""
    return n.to_bytes(32, "big")


def signed_word(n: int) -> bytes:
    """Expected 32-byte two's-complement word."""
    return n.to_bytes(32, "big", signed=True)


def read_json_fixture(relpath: str) -> Any:
    path = (FIXTURES / relpath).resolve()
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
