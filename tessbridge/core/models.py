import io
import os
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from pathlib import Path
from typing import Iterator, Mapping, Optional, Union

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from tessbridge.config.settings import Settings, settings as default_settings
from tessbridge.core.errors import ImageFormatError, ImageNotFoundError
from tessbridge.i18n.strings import Strings
from tessbridge.utils.logger import logger

# Modes Pillow can write straight to PNG
PNG_MODES = {"1", "L", "LA", "P", "RGB", "RGBA", "I", "I;16"}


@dataclass(frozen=True)
class Args:
    """Recognition options forwarded verbatim to tesseract."""
    lang: str = "eng"
    dpi: int = 150
    psm: int = 3
    oem: int = 3
    config_variables: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Private read-only copy; later edits to the caller's dict must not leak in
        object.__setattr__(self, "config_variables", MappingProxyType(dict(self.config_variables)))

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Args":
        settings = settings or default_settings
        return cls(
            lang=settings.DEFAULT_LANG,
            dpi=settings.DEFAULT_DPI,
            psm=settings.DEFAULT_PSM,
            oem=settings.DEFAULT_OEM,
            config_variables=dict(settings.DEFAULT_CONFIG_VARIABLES),
        )

    def with_config(self, **overrides: str) -> "Args":
        """Returns a copy with extra engine configuration overrides."""
        merged = dict(self.config_variables)
        merged.update({key: str(value) for key, value in overrides.items()})
        return replace(self, config_variables=merged)

    def config_variable_arg(self) -> Optional[str]:
        """
        Combined parameter for the single -c flag, or None without overrides.
        Pairs keep insertion order.
        """
        if not self.config_variables:
            return None
        return ",".join(f"{key}={value}" for key, value in self.config_variables.items())


@dataclass(frozen=True)
class Image:
    """
    An image handed to tesseract.

    Either a file on disk, or pixels held in memory that get written to a
    temporary PNG for the duration of one call.
    """
    path: Optional[Path] = None
    pil_image: Optional[PILImage.Image] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if (self.path is None) == (self.pil_image is None):
            raise ValueError("Image needs exactly one of path or pil_image")

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "Image":
        path = Path(path)
        if not path.exists():
            raise ImageNotFoundError(Strings.IMAGE_NOT_FOUND.value.format(path))
        return cls(path=path)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Image":
        try:
            pil_image = PILImage.open(io.BytesIO(data))
            pil_image.load()
        except (UnidentifiedImageError, OSError) as e:
            raise ImageFormatError(Strings.IMAGE_UNREADABLE.value.format(e)) from e
        return cls.from_pil(pil_image)

    @classmethod
    def from_pil(cls, pil_image: PILImage.Image) -> "Image":
        return cls(pil_image=pil_image)

    @property
    def in_memory(self) -> bool:
        return self.path is None

    @contextmanager
    def resolve(self) -> Iterator[str]:
        """Yields a path tesseract can read. Temporary files are removed on exit."""
        if self.path is not None:
            yield str(self.path)
            return

        pil_image = self.pil_image
        if pil_image.mode not in PNG_MODES:
            pil_image = pil_image.convert("RGB")

        fd, tmp_path = tempfile.mkstemp(prefix="tessbridge-", suffix=".png")
        os.close(fd)
        try:
            pil_image.save(tmp_path, format="PNG")
            logger.debug(Strings.TEMP_IMAGE_WRITTEN.value.format(tmp_path))
            yield tmp_path
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)


@dataclass
class ProcessResult:
    stdout: str
    stderr: str
    # None when the process died without an exit code (e.g. killed by a signal)
    returncode: Optional[int]

    @property
    def ok(self) -> bool:
        return self.returncode == 0
