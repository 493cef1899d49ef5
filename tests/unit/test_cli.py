from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from evm_codec.cli.main import app
from evm_codec.version import __version__


# Every invocation reconfigures the package logger.
pytestmark = pytest.mark.usefixtures("codec_logger")


def run_cli(runner: CliRunner, args: list[str], code: int = 0) -> str:
    result = runner.invoke(app, args)
    assert result.exit_code == code, result.output
    return result.output


def test_encode_uint256_from_json_string(runner: CliRunner) -> None:
    out = run_cli(runner, ["encode", "uint256", '"0x1a"'])
    assert out.strip() == "0x" + "00" * 31 + "1a"


def test_encode_negative_int256(runner: CliRunner) -> None:
    out = run_cli(runner, ["encode", "int256", '"-5"'])
    assert out.strip() == "0x" + "ff" * 31 + "fb"


def test_encode_bool_literals(runner: CliRunner) -> None:
    assert run_cli(runner, ["encode", "bool", "true"]).strip().endswith("01")
    assert run_cli(runner, ["encode", "bool", "null"]).strip() == "0x" + "00" * 32


def test_encode_raw_string(runner: CliRunner) -> None:
    out = run_cli(runner, ["encode", "bytes", "hello", "--string"]).strip()
    raw = bytes.fromhex(out[2:])
    assert len(raw) == 96
    assert raw[:32] == (64).to_bytes(32, "big")
    assert raw[32:64] == (5).to_bytes(32, "big")
    assert raw[64:69] == b"hello"


def test_encode_json_output(runner: CliRunner) -> None:
    out = run_cli(runner, ["--json", "encode", "uint256", "26"])
    data = json.loads(out)
    assert data == {
        "ok": True,
        "format": "uint256",
        "length": 32,
        "hex": "0x" + "00" * 31 + "1a",
    }


def test_unknown_format_exits_1(runner: CliRunner) -> None:
    out = run_cli(runner, ["encode", "uint8", "1"], code=1)
    assert "CODEC/FORMAT: unsupported format: uint8" in out


def test_parse_error_exits_1(runner: CliRunner) -> None:
    out = run_cli(runner, ["encode", "uint256", '"0xzz"'], code=1)
    assert "CODEC/PARSE" in out
    assert "0xzz" in out


def test_invalid_json_without_string_flag(runner: CliRunner) -> None:
    out = run_cli(runner, ["encode", "bytes", "hello"], code=1)
    assert "CODEC/PARSE: invalid JSON" in out


def test_error_as_json(runner: CliRunner) -> None:
    out = run_cli(
        runner,
        ["--json", "--log-level", "CRITICAL", "encode", "uint256", '"-1"'],
        code=1,
    )
    data = json.loads(out)
    assert data["ok"] is False
    assert data["error"]["code"] == "CODEC/SIGN"
    assert data["error"]["message"] == "Uint256 cannot be negative"
    assert data["error"]["retryable"] is False


def test_input_limit_from_env(runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVM_CODEC_MAX_INPUT_BYTES", "1024")
    value = json.dumps("a" * 2000)
    out = run_cli(runner, ["encode", "bytes", value], code=1)
    assert "CODEC/LIMIT" in out


def test_debug_log_line(runner: CliRunner) -> None:
    out = run_cli(runner, ["--log-level", "DEBUG", "--log-format", "json", "encode", "bool", "1"])
    lines = [ln for ln in out.splitlines() if ln.startswith("{")]
    logs = [json.loads(ln) for ln in lines]
    assert any(x["msg"] == "encoded" and x["format"] == "bool" and x["size"] == 32 for x in logs)


def test_decode_word(runner: CliRunner) -> None:
    hex_word = "0x" + "ff" * 31 + "fb"
    assert run_cli(runner, ["decode-word", hex_word]).strip() == str(2**256 - 5)
    assert run_cli(runner, ["decode-word", hex_word, "--signed"]).strip() == "-5"


def test_decode_word_json(runner: CliRunner) -> None:
    out = run_cli(runner, ["--json", "decode-word", "1a" * 32])
    assert json.loads(out) == {"ok": True, "signed": False, "value": str(int("1a" * 32, 16))}


def test_decode_word_wrong_length(runner: CliRunner) -> None:
    out = run_cli(runner, ["decode-word", "0x01"], code=1)
    assert "CODEC/FORMAT: EVM word must be 32 bytes, got 1" in out


def test_decode_word_bad_hex(runner: CliRunner) -> None:
    out = run_cli(runner, ["decode-word", "0xgg"], code=1)
    assert "CODEC/PARSE" in out


def test_formats(runner: CliRunner) -> None:
    assert run_cli(runner, ["formats"]).split() == ["bytes", "uint256", "int256", "bool"]
    data = json.loads(run_cli(runner, ["--json", "formats"]))
    assert data["formats"] == ["bytes", "uint256", "int256", "bool"]


def test_version(runner: CliRunner) -> None:
    assert run_cli(runner, ["version"]).strip() == __version__


def test_missing_argument_is_usage_error(runner: CliRunner) -> None:
    result = runner.invoke(app, ["encode", "uint256"])
    assert result.exit_code == 2


def test_lone_surrogate_exits_1(runner: CliRunner) -> None:
    result = runner.invoke(app, ["encode", "bytes", '"\\ud800"'])
    assert result.exit_code == 1, result.output
    assert not isinstance(result.exception, UnicodeError)
    assert "CODEC/PARSE" in result.output
