from typing import Optional


class TesseractError(Exception):
    """Base class for everything raised by tessbridge."""


class TesseractNotFoundError(TesseractError):
    """The tesseract executable could not be spawned."""


class TesseractProcessError(TesseractError):
    """Tesseract ran but exited nonzero or died abnormally."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr

    @property
    def terminated_abnormally(self) -> bool:
        return self.returncode is None


class OutputDecodingError(TesseractError):
    """Captured stdout or stderr was not valid UTF-8."""

    def __init__(self, message: str, stream: str):
        super().__init__(message)
        self.stream = stream


class ImageNotFoundError(TesseractError):
    pass


class ImageFormatError(TesseractError):
    pass
