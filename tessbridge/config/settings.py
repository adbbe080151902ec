from pydantic_settings import BaseSettings
from pydantic import Field, ValidationError
from typing import Dict, Optional
from pathlib import Path
import json

class Settings(BaseSettings):
    # Core Settings
    APP_NAME: str = "tessbridge"
    DEBUG: bool = False

    # Binary override; None means resolve tesseract on PATH
    TESSERACT_CMD: Optional[str] = None

    # Recognition defaults
    DEFAULT_LANG: str = "eng"
    DEFAULT_DPI: int = 150
    DEFAULT_PSM: int = 3
    DEFAULT_OEM: int = 3
    DEFAULT_CONFIG_VARIABLES: Dict[str, str] = Field(default_factory=dict)

    # Paths
    LOG_FILE: Optional[Path] = None
    CONFIG_FILE: Path = Path.home() / ".tessbridge" / "config.json"

    class Config:
        env_prefix = "TESSBRIDGE_"
        env_file = ".env"
        env_file_encoding = "utf-8"

    @classmethod
    def load_from_json(cls, config_path: Optional[Path] = None):
        """Load settings from JSON config file if exists."""
        start_defaults = {}
        config_path = config_path or Path.home() / ".tessbridge" / "config.json"

        if config_path.exists():
            try:
                with open(config_path, "r") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError(f"expected a JSON object, got {type(data).__name__}")
                if data.get("LOG_FILE"):
                    data["LOG_FILE"] = Path(data["LOG_FILE"])
                start_defaults.update(data)
            except (OSError, TypeError, ValueError) as e:
                print(f"Warning: Failed to load {config_path}: {e}")

        start_defaults.setdefault("CONFIG_FILE", config_path)
        return cls(**start_defaults)

def load_settings(config_path: Optional[Path] = None) -> Settings:
    try:
        return Settings.load_from_json(config_path)
    except ValidationError as e:
        print(f"Warning: Ignoring invalid config.json: {e}")
        return Settings()

# Global settings instance
settings = load_settings()
