"""
evm-codec — encode JSON values as EVM call arguments from the shell.

Commands:
  evm-codec encode FORMAT VALUE      Transcode a JSON value, print 0x-hex
  evm-codec decode-word HEX          Read the integer held in a 32-byte word
  evm-codec formats                  List supported format tags
  evm-codec version                  Print the package version

Global options:
  --json                   Output JSON instead of plain text
  --log-level TEXT         Log level (default from EVM_CODEC_LOG_LEVEL)
  --log-format TEXT        text|json (default from EVM_CODEC_LOG_FORMAT)

Examples:
  evm-codec encode uint256 '"0x1a"'
  evm-codec encode bytes hello --string
  evm-codec encode bool true
  evm-codec --json encode int256 '"-5"'
  evm-codec decode-word 0xff…fb --signed

Exit codes: 0 on success, 1 on codec errors, 2 on usage errors.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

import typer

from evm_codec import logging as clog
from evm_codec.config import load_config
from evm_codec.errors import CodecError
from evm_codec.hexutil import from_hex, to_hex
from evm_codec.transcode import transcode_json, transcode_with_format
from evm_codec.types import Format
from evm_codec.version import __version__
from evm_codec.words import decode_signed_word, decode_unsigned_word

app = typer.Typer(
    name="evm-codec",
    help="Encode JSON values as EVM call arguments",
    no_args_is_help=True,
    add_completion=False,
)

log = clog.get_logger(__name__)


class GlobalContext:
    def __init__(self) -> None:
        self.json_output: bool = False


_ctx = GlobalContext()


def _emit(payload: Dict[str, Any], text: str) -> None:
    if _ctx.json_output:
        typer.echo(json.dumps(payload, separators=(",", ":")))
    else:
        typer.echo(text)


def _fail(err: CodecError, **fields: Any) -> None:
    log.error(err.message, extra={"code": err.code, **fields})
    if _ctx.json_output:
        typer.echo(json.dumps({"ok": False, "error": err.to_dict()}, separators=(",", ":")))
    else:
        typer.echo(f"{err.code}: {err.message}", err=True)
    raise typer.Exit(1)


@app.callback()
def main_callback(
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output JSON instead of plain text",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (CRITICAL, ERROR, WARNING, INFO, DEBUG)",
    ),
    log_format: Optional[str] = typer.Option(
        None,
        "--log-format",
        help="Log line format: text or json",
    ),
) -> None:
    """
    Transcode JSON values into ABI words for the bytes, uint256, int256 and
    bool formats.

    Settings resolve from flags first, then EVM_CODEC_* environment
    variables, then built-in defaults.
    """
    cfg = load_config()
    _ctx.json_output = json_output
    fmt = (log_format or cfg.log_format).strip().lower()
    clog.configure(json=fmt == "json", level=log_level or cfg.log_level)


@app.command()
def encode(
    fmt: str = typer.Argument(..., metavar="FORMAT", help="bytes, uint256, int256 or bool"),
    value: str = typer.Argument(..., help="JSON value, e.g. '\"0x1a\"', 5, true, null"),
    string: bool = typer.Option(
        False,
        "--string",
        "-s",
        help="Treat VALUE as a raw string instead of JSON text",
    ),
) -> None:
    """Transcode VALUE for FORMAT and print the encoding as 0x-hex."""
    try:
        if string:
            out = transcode_with_format(value, fmt)
        else:
            out = transcode_json(value, fmt)
    except CodecError as err:
        _fail(err, format=fmt)
        return
    log.debug("encoded", extra={"format": fmt, "size": len(out)})
    hex_out = to_hex(out)
    _emit({"ok": True, "format": fmt, "length": len(out), "hex": hex_out}, hex_out)


@app.command("decode-word")
def decode_word(
    word: str = typer.Argument(..., help="32-byte word as hex (0x optional)"),
    signed: bool = typer.Option(
        False,
        "--signed",
        help="Interpret the word as two's-complement int256",
    ),
) -> None:
    """Print the integer stored in a 32-byte word."""
    try:
        raw = from_hex(word)
        n = decode_signed_word(raw) if signed else decode_unsigned_word(raw)
    except CodecError as err:
        _fail(err)
        return
    _emit({"ok": True, "signed": signed, "value": str(n)}, str(n))


@app.command()
def formats() -> None:
    """List the supported format tags."""
    tags = [f.value for f in Format]
    _emit({"ok": True, "formats": tags}, "\n".join(tags))


@app.command()
def version() -> None:
    """Print the evm_codec version."""
    _emit({"ok": True, "version": __version__}, __version__)


def main() -> None:
    """Entry point for the evm-codec CLI."""
    app()


if __name__ == "__main__":
    main()
