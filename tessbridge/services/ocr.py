from pathlib import Path
from typing import List, Optional, Union

from tessbridge.core.models import Args, Image
from tessbridge.infrastructure.tesseract.command import (
    create_tesseract_command,
    list_langs_command,
    version_command,
)
from tessbridge.infrastructure.tesseract.runner import run_tesseract_command


def get_tesseract_version() -> str:
    """Raw `tesseract --version` output, untrimmed."""
    return run_tesseract_command(version_command())


def get_tesseract_langs() -> List[str]:
    """
    Installed language codes in the order tesseract lists them.
    The first line of output is a header and is dropped.
    """
    output = run_tesseract_command(list_langs_command())
    return output.splitlines()[1:]


def image_to_string(image: Union[Image, str, Path], args: Optional[Args] = None) -> str:
    if not isinstance(image, Image):
        image = Image.from_path(image)
    args = args or Args.from_settings()

    with image.resolve() as image_path:
        command = create_tesseract_command(image_path, args)
        return run_tesseract_command(command)
