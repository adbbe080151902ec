import logging
import subprocess
import sys

import pytest

from tessbridge.core.errors import (
    OutputDecodingError,
    TesseractError,
    TesseractNotFoundError,
    TesseractProcessError,
)
from tessbridge.core.models import ProcessResult
from tessbridge.infrastructure.tesseract import runner


def python_command(code):
    return [sys.executable, "-c", code]


def test_success_returns_stdout():
    out = runner.run_tesseract_command(python_command("print('hello')"))
    assert out.strip() == "hello"


def test_stdout_is_not_trimmed():
    out = runner.run_tesseract_command(python_command("import sys; sys.stdout.write('a\\n\\n')"))
    assert out == "a\n\n"


def test_nonzero_exit_is_process_error():
    code = "import sys; sys.stderr.write('boom'); sys.exit(1)"
    with pytest.raises(TesseractProcessError) as excinfo:
        runner.run_tesseract_command(python_command(code))

    message = str(excinfo.value)
    assert "1" in message
    assert "boom" in message
    assert excinfo.value.returncode == 1
    assert excinfo.value.stderr == "boom"
    assert not excinfo.value.terminated_abnormally


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals only")
def test_signal_death_is_process_error():
    code = (
        "import os, signal, sys\n"
        "sys.stderr.write('dying')\n"
        "sys.stderr.flush()\n"
        "os.kill(os.getpid(), signal.SIGKILL)\n"
    )
    with pytest.raises(TesseractProcessError) as excinfo:
        runner.run_tesseract_command(python_command(code))

    assert "terminated by signal" in str(excinfo.value)
    assert "dying" in str(excinfo.value)
    assert excinfo.value.terminated_abnormally


def test_missing_binary_is_not_found_error():
    with pytest.raises(TesseractNotFoundError) as excinfo:
        runner.run_tesseract_command(["tessbridge-no-such-binary-4821", "--version"])

    assert not isinstance(excinfo.value, TesseractProcessError)
    assert isinstance(excinfo.value, TesseractError)


def test_invalid_utf8_is_decoding_error():
    code = "import sys; sys.stdout.buffer.write(b'\\xff\\xfe\\xfa')"
    with pytest.raises(OutputDecodingError) as excinfo:
        runner.run_tesseract_command(python_command(code))

    assert excinfo.value.stream == "stdout"


def test_check_result_messages():
    assert runner.check_result(ProcessResult(stdout="text", stderr="", returncode=0)) == "text"

    with pytest.raises(TesseractProcessError, match="Process exited with code: 3, stderr: bad lang"):
        runner.check_result(ProcessResult(stdout="", stderr="bad lang", returncode=3))

    with pytest.raises(TesseractProcessError, match="Process terminated by signal, stderr: killed"):
        runner.check_result(ProcessResult(stdout="", stderr="killed", returncode=None))


def test_negative_returncode_maps_to_abnormal_termination(monkeypatch):
    def fake_run(command, **kwargs):
        return subprocess.CompletedProcess(command, -9, b"", b"killed")

    monkeypatch.setattr(runner.subprocess, "run", fake_run)
    result = runner.execute(["tesseract", "--version"])

    assert result.returncode is None
    assert result.stderr == "killed"
    assert not result.ok


def test_streams_are_captured_not_inherited(monkeypatch):
    seen = {}

    def fake_run(command, **kwargs):
        seen.update(kwargs)
        return subprocess.CompletedProcess(command, 0, b"ok", b"")

    monkeypatch.setattr(runner.subprocess, "run", fake_run)
    runner.run_tesseract_command(["tesseract", "--version"])

    assert seen["stdout"] is subprocess.PIPE
    assert seen["stderr"] is subprocess.PIPE
    assert seen["stdin"] is subprocess.DEVNULL


def test_window_suppressed_when_platform_supports_it(monkeypatch):
    seen = {}

    def fake_run(command, **kwargs):
        seen.update(kwargs)
        return subprocess.CompletedProcess(command, 0, b"", b"")

    monkeypatch.setattr(runner.subprocess, "run", fake_run)
    monkeypatch.setattr(runner.subprocess, "CREATE_NO_WINDOW", 0x08000000, raising=False)
    runner.run_tesseract_command(["tesseract.exe", "--version"])

    assert seen["creationflags"] == 0x08000000


def test_no_window_flag_elsewhere(monkeypatch):
    seen = {}

    def fake_run(command, **kwargs):
        seen.update(kwargs)
        return subprocess.CompletedProcess(command, 0, b"", b"")

    monkeypatch.setattr(runner.subprocess, "run", fake_run)
    monkeypatch.delattr(runner.subprocess, "CREATE_NO_WINDOW", raising=False)
    runner.run_tesseract_command(["tesseract", "--version"])

    assert seen["creationflags"] == 0


def test_command_line_logged_only_in_debug(clean_settings, monkeypatch, caplog):
    command = python_command("pass")

    runner.run_tesseract_command(command)
    assert "Tesseract Command:" not in caplog.text

    monkeypatch.setattr(clean_settings, "DEBUG", True)
    runner.run_tesseract_command(command)
    assert "Tesseract Command: " + " ".join(command) in caplog.text


def test_debug_switched_on_after_import_reaches_handlers(clean_settings, monkeypatch, caplog):
    # Logger configured while DEBUG was off
    runner.logger.setLevel(logging.INFO)
    for handler in runner.logger.handlers:
        handler.setLevel(logging.INFO)

    monkeypatch.setattr(clean_settings, "DEBUG", True)
    runner.run_tesseract_command(python_command("pass"))

    records = [r for r in caplog.records if r.getMessage().startswith("Tesseract Command:")]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG
    assert all(handler.level <= logging.DEBUG for handler in runner.logger.handlers)
