"""
Shared pytest fixtures:
- Clean EVM_CODEC_* environment and a fresh config cache per test
- A CliRunner for the evm-codec command line
"""
from __future__ import annotations

import logging
import os

import pytest
from typer.testing import CliRunner

from evm_codec.config import load_config


@pytest.fixture(autouse=True)
def _clean_codec_env(monkeypatch: pytest.MonkeyPatch):
    for name in list(os.environ):
        if name.startswith("EVM_CODEC_"):
            monkeypatch.delenv(name, raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def codec_logger():
    """The package logger, with handlers restored after the test."""
    logger = logging.getLogger("evm_codec")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
