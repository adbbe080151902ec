from enum import Enum

class Strings(str, Enum):
    # Runner
    COMMAND_LINE = "Tesseract Command: {}"
    NOT_FOUND = "{} is not installed or it's not in your PATH"
    EXITED_WITH_CODE = "Process exited with code: {}, stderr: {}"
    TERMINATED_BY_SIGNAL = "Process terminated by signal, stderr: {}"
    DECODING_FAILED = "Failed to decode tesseract {} as UTF-8: {}"

    # Images
    IMAGE_NOT_FOUND = "Image not found: {}"
    IMAGE_UNREADABLE = "Could not decode image data: {}"
    TEMP_IMAGE_WRITTEN = "Wrote temporary image {}"

    # Main App
    VERSION_HEADER = "[bold]Tesseract version[/bold]"
    LANGS_HEADER = "[bold]Installed languages ({}):[/bold]"
    BAD_CONFIG_VARIABLE = "Config variable must be KEY=VALUE, got: {}"
    FATAL_ERROR = "Fatal error: {}"
