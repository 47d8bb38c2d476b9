from __future__ import annotations

import io
import os

import pytest
import uvicorn

from binconv.cli import main
from binconv.config import get_settings


def test_encode_argument(capsys):
    assert main(["encode", "5"]) == 0
    assert capsys.readouterr().out == "101\n"


def test_encode_round_trip(capsys):
    assert main(["encode", "50", "--round-trip"]) == 0
    assert capsys.readouterr().out == "110010\n50\n"


def test_decode_from_stdin(capsys):
    assert main(["decode"], stdin=io.StringIO("110010\n")) == 0
    assert capsys.readouterr().out == "50\n"


def test_encode_zero(capsys):
    assert main(["encode", "0"]) == 0
    assert capsys.readouterr().out == "0\n"


def test_negative_input_exits_non_zero(capsys):
    assert main(["encode", "-1"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "non-negative" in captured.err


def test_garbage_input_exits_non_zero(capsys):
    assert main(["decode"], stdin=io.StringIO("abc\n")) == 1
    assert "Not an integer" in capsys.readouterr().err


def test_strict_decode(capsys):
    assert main(["decode", "102", "--strict"]) == 1
    assert "not binary" in capsys.readouterr().err
    assert main(["decode", "102"]) == 0
    assert capsys.readouterr().out == "6\n"


def test_int_bits_overflow(capsys):
    assert main(["--int-bits", "32", "encode", "1024"]) == 1
    assert "32-bit" in capsys.readouterr().err


def test_demo_prints_encoded_and_round_trip(capsys):
    assert main(["demo"]) == 0
    lines = capsys.readouterr().out.split()
    assert lines == [
        "10", "2", "11", "3", "100", "4", "101", "5", "110", "6",
        "111", "7", "1000", "8", "1001", "9", "1010", "10",
    ]


def test_missing_command_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_encode_from_stdin_with_round_trip(capsys):
    assert main(["encode", "--round-trip"], stdin=io.StringIO("10\n")) == 0
    assert capsys.readouterr().out == "1010\n10\n"


def test_encode_output_longer_than_default_str_limit(capsys):
    assert main(["encode", str(2**4300)]) == 0
    assert capsys.readouterr().out == "1" + "0" * 4300 + "\n"


def test_decode_input_longer_than_default_str_limit(capsys):
    assert main(["decode", "1" * 4400]) == 0
    captured = capsys.readouterr()
    assert captured.out == str(2**4400 - 1) + "\n"
    assert captured.err == ""


def test_garbage_input_is_not_echoed_in_full(capsys):
    assert main(["decode", "x" * 500]) == 1
    err = capsys.readouterr().err
    assert "Not an integer" in err
    assert len(err) < 120


def test_verbose_logs_conversions_to_stderr(capsys):
    assert main(["--verbose", "encode", "5"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "101\n"
    assert "encode 5 -> 101" in captured.err


def test_debug_setting_logs_conversions(monkeypatch, capsys):
    monkeypatch.setenv("BinConv_Debug", "true")
    assert main(["decode", "110010"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "50\n"
    assert "decode 110010 -> 50" in captured.err


def test_conversions_are_quiet_by_default(capsys):
    assert main(["encode", "5"]) == 0
    assert capsys.readouterr().err == ""


def test_lenient_decode_warns_about_non_binary_digits(capsys):
    assert main(["decode", "102"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "6\n"
    assert "WARNING" in captured.err
    assert main(["decode", "101"]) == 0
    assert "WARNING" not in capsys.readouterr().err


def test_serve_passes_int_bits_to_the_app(monkeypatch):
    calls = []
    monkeypatch.setenv("BinConv_IntBits", "")
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    assert main(["--int-bits", "32", "serve", "--port", "9001"]) == 0

    assert calls == [("binconv.main:app", {"host": "127.0.0.1", "port": 9001})]
    assert os.environ["BinConv_IntBits"] == "32"
    assert get_settings().int_bits == 32


def test_serve_without_int_bits_keeps_environment(monkeypatch):
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: None)
    assert main(["serve"]) == 0
    assert "BinConv_IntBits" not in os.environ


def test_invalid_int_bits_is_rejected_before_serving(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append(app))
    assert main(["--int-bits", "1", "serve"]) == 1
    assert calls == []
    assert "Integer width" in capsys.readouterr().err
