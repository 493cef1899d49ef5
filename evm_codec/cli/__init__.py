"""Command line front-end for evm_codec (`evm-codec`)."""

from __future__ import annotations

from .main import app, main

__all__ = ["app", "main"]
