import pytest
from PIL import Image as PILImage

from tessbridge.config.settings import settings
from tessbridge.utils.logger import logger


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Pin settings so a developer's env or config.json can't leak into tests."""
    monkeypatch.setattr(settings, "DEBUG", False)
    monkeypatch.setattr(settings, "TESSERACT_CMD", None)
    monkeypatch.setattr(settings, "DEFAULT_LANG", "eng")
    monkeypatch.setattr(settings, "DEFAULT_DPI", 150)
    monkeypatch.setattr(settings, "DEFAULT_PSM", 3)
    monkeypatch.setattr(settings, "DEFAULT_OEM", 3)
    monkeypatch.setattr(settings, "DEFAULT_CONFIG_VARIABLES", {})
    return settings


@pytest.fixture(autouse=True)
def restore_logger_levels():
    levels = (logger.level, [handler.level for handler in logger.handlers])
    yield
    logger.setLevel(levels[0])
    for handler, level in zip(logger.handlers, levels[1]):
        handler.setLevel(level)


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "page.png"
    PILImage.new("RGB", (32, 16), "white").save(path)
    return path


