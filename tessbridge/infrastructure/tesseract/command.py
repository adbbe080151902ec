import sys
from typing import List, Optional

from tessbridge.config.settings import settings
from tessbridge.core.models import Args


def tesseract_program(platform: Optional[str] = None) -> str:
    """Executable name for the platform, unless TESSERACT_CMD overrides it."""
    if settings.TESSERACT_CMD:
        return settings.TESSERACT_CMD
    platform = platform or sys.platform
    return "tesseract.exe" if platform == "win32" else "tesseract"


def get_tesseract_command(platform: Optional[str] = None) -> List[str]:
    return [tesseract_program(platform)]


def version_command() -> List[str]:
    return get_tesseract_command() + ["--version"]


def list_langs_command() -> List[str]:
    return get_tesseract_command() + ["--list-langs"]


def create_tesseract_command(image_path: str, args: Args) -> List[str]:
    """
    Full argument vector for recognizing one image, text written to stdout.
    At most one -c flag is emitted however many overrides are set.
    """
    command = get_tesseract_command()
    command += [
        str(image_path),
        "stdout",
        "-l", args.lang,
        "--dpi", str(args.dpi),
        "--psm", str(args.psm),
        "--oem", str(args.oem),
    ]

    parameter = args.config_variable_arg()
    if parameter is not None:
        command += ["-c", parameter]

    return command
