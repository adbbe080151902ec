import subprocess
from typing import List

from tessbridge.config.settings import settings
from tessbridge.core.errors import OutputDecodingError, TesseractNotFoundError, TesseractProcessError
from tessbridge.core.models import ProcessResult
from tessbridge.i18n.strings import Strings
from tessbridge.utils.logger import logger, sync_debug_level


def _creation_flags() -> int:
    # Keeps a console window from flashing up on Windows
    return subprocess.CREATE_NO_WINDOW if hasattr(subprocess, "CREATE_NO_WINDOW") else 0


def _decode(data: bytes, stream: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise OutputDecodingError(Strings.DECODING_FAILED.value.format(stream, e), stream=stream) from e


def show_command(command: List[str]):
    sync_debug_level(logger)
    logger.debug(Strings.COMMAND_LINE.value.format(" ".join(command)))


def execute(command: List[str]) -> ProcessResult:
    """Spawns the command, waits for it and captures both streams."""
    if settings.DEBUG:
        show_command(command)

    try:
        completed = subprocess.run(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
            creationflags=_creation_flags(),
        )
    except OSError as e:
        raise TesseractNotFoundError(Strings.NOT_FOUND.value.format(command[0])) from e

    stdout = _decode(completed.stdout, "stdout")
    stderr = _decode(completed.stderr, "stderr")

    # Negative return codes mean the child was killed by that signal (POSIX)
    returncode = completed.returncode if completed.returncode >= 0 else None
    return ProcessResult(stdout=stdout, stderr=stderr, returncode=returncode)


def check_result(result: ProcessResult) -> str:
    """Returns stdout on success, raises TesseractProcessError otherwise."""
    if result.ok:
        return result.stdout

    if result.returncode is None:
        message = Strings.TERMINATED_BY_SIGNAL.value.format(result.stderr)
    else:
        message = Strings.EXITED_WITH_CODE.value.format(result.returncode, result.stderr)
    raise TesseractProcessError(message, returncode=result.returncode, stderr=result.stderr)


def run_tesseract_command(command: List[str]) -> str:
    return check_result(execute(command))
