from types import SimpleNamespace

import pytest

from totpgen import utils
from totpgen.cli import EXIT_OK, EXIT_USAGE, main

SECRET = "12345678901234567890"


def test_default_output(capsys: pytest.CaptureFixture) -> None:
    assert main(["-s", SECRET, "--time", "59"]) == EXIT_OK
    out, err = capsys.readouterr()
    assert out == "TOTP generated (Alg: SHA1, Digits: 6, Step: 30): 287082\n"


def test_quiet_output(capsys: pytest.CaptureFixture) -> None:
    argv = ["--secret", "12345678901234567890123456789012", "--alg", "sha256", "-d", "8", "-q", "--time", "59"]
    assert main(argv) == EXIT_OK
    out, err = capsys.readouterr()
    assert out == "46119246\n"


def test_step_flag(capsys: pytest.CaptureFixture) -> None:
    assert main(["-s", SECRET, "-t", "60", "-d", "8", "--time", "119"]) == EXIT_OK
    out, err = capsys.readouterr()
    assert out.endswith("Step: 60): 94287082\n")


def test_missing_secret(capsys: pytest.CaptureFixture) -> None:
    assert main([]) == EXIT_USAGE
    out, err = capsys.readouterr()
    assert out == ""
    assert "Error: secret is mandatory" in err
    assert "usage:" in err


def test_unknown_algorithm(capsys: pytest.CaptureFixture) -> None:
    assert main(["-s", SECRET, "-a", "MD5"]) == EXIT_USAGE
    out, err = capsys.readouterr()
    assert out == ""
    assert "Algorithm 'MD5' not supported" in err


@pytest.mark.parametrize("flag,value,message", [("-d", "0", "digits"), ("-t", "-1", "time step")])
def test_invalid_numbers(capsys: pytest.CaptureFixture, flag: str, value: str, message: str) -> None:
    assert main(["-s", SECRET, flag, value]) == EXIT_USAGE
    out, err = capsys.readouterr()
    assert out == ""
    assert message in err


def test_non_integer_digits() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["-s", SECRET, "-d", "six"])
    assert exc_info.value.code == EXIT_USAGE


@pytest.mark.parametrize("when", ["-1", str(2**64 * 30)])
def test_time_out_of_counter_range(capsys: pytest.CaptureFixture, when: str) -> None:
    assert main(["-s", SECRET, "--time", when]) == EXIT_USAGE
    out, err = capsys.readouterr()
    assert out == ""
    assert "Error: counter must fit in 8 unsigned bytes" in err


def test_clock_read_once(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    readings = iter([59.0])
    monkeypatch.setattr(utils, "time", SimpleNamespace(time=lambda: next(readings)))
    assert main(["-s", SECRET]) == EXIT_OK
    out, err = capsys.readouterr()
    assert out.endswith(": 287082\n")
