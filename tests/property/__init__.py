# -*- coding: utf-8 -*-
"""
tests.property package bootstrap.

Registers Hypothesis profiles and picks one on import:
- HYPOTHESIS_PROFILE=dev|ci|stress wins when set
- otherwise "ci" when the CI env var is truthy, "dev" locally

Also exposes a `json_values()` strategy producing the shapes `json.loads`
can return, so transcoder properties see every JSON kind.
"""
from __future__ import annotations

import os
from typing import Final

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

settings.register_profile(
    "dev",
    settings(
        max_examples=100,
        deadline=None,
        suppress_health_check=(HealthCheck.too_slow,),
        derandomize=False,
    ),
)

settings.register_profile(
    "ci",
    settings(
        max_examples=300,
        deadline=None,
        suppress_health_check=(HealthCheck.too_slow,),
        derandomize=True,
    ),
)

settings.register_profile(
    "stress",
    settings(
        max_examples=2000,
        deadline=None,
        suppress_health_check=(HealthCheck.too_slow, HealthCheck.data_too_large),
        derandomize=True,
    ),
)


def _env_truthy(name: str) -> bool:
    v = os.getenv(name)
    return (v or "").lower() not in ("", "0", "false", "no", "off")


_active: Final[str] = os.getenv("HYPOTHESIS_PROFILE") or (
    "ci" if _env_truthy("CI") else "dev"
)
settings.load_profile(_active)


def json_scalars():
    return (
        st.none()
        | st.booleans()
        | st.integers(min_value=-(2**70), max_value=2**70)
        | st.floats(allow_nan=False, allow_infinity=False)
        | st.text(max_size=80)
    )


def json_values():
    return st.recursive(
        json_scalars(),
        lambda children: st.lists(children, max_size=3)
        | st.dictionaries(st.text(max_size=5), children, max_size=3),
        max_leaves=6,
    )


__all__ = ["st", "given", "json_scalars", "json_values"]
