from tessbridge.core.errors import (
    ImageFormatError,
    ImageNotFoundError,
    OutputDecodingError,
    TesseractError,
    TesseractNotFoundError,
    TesseractProcessError,
)
from tessbridge.core.models import Args, Image
from tessbridge.services import get_tesseract_langs, get_tesseract_version, image_to_string

__version__ = "0.1.0"
