"""Configuration management for NASA TUI."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import toml

ALLOWED_THEMES = ["Deep Space", "Nebula", "Mission Control"]
DEFAULT_API_URL = "https://images-api.nasa.gov/search"
CONFIG_FILE_PATH = Path.home() / ".nasatui.config"


@dataclass
class GalleryConfig:
    """Gallery configuration settings."""

    default_query: str = "galaxy"
    theme: str = "Deep Space"
    api_url: str = DEFAULT_API_URL
    page_size: int = 100
    debounce_ms: int = 600
    request_timeout: float = 10.0

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        """Validate configuration settings."""
        if self.theme not in ALLOWED_THEMES:
            raise ValueError(f"Invalid theme '{self.theme}'. Allowed themes: {', '.join(ALLOWED_THEMES)}")

        if not self.default_query or not self.default_query.strip():
            raise ValueError("default_query must not be empty")

        if not self.api_url.startswith(("http://", "https://")):
            raise ValueError(f"Invalid api_url '{self.api_url}'. Must be an http(s) URL")

        if self.page_size < 1:
            raise ValueError(f"page_size must be a positive integer, got {self.page_size}")

        if self.debounce_ms < 0:
            raise ValueError(f"debounce_ms must not be negative, got {self.debounce_ms}")

        if self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive, got {self.request_timeout}")


def load_config(config_file_path: Optional[str] = None) -> GalleryConfig:
    """Load configuration from file."""
    if config_file_path:
        config_path = Path(config_file_path)
    else:
        config_path = CONFIG_FILE_PATH

    if not config_path.exists():
        return GalleryConfig()

    try:
        with open(config_path, "r") as f:
            config_data = toml.load(f)

        # Unknown keys are ignored so older config files keep loading
        valid_fields = {field.name for field in GalleryConfig.__dataclass_fields__.values()}
        filtered_config = {key: value for key, value in config_data.items() if key in valid_fields}

        return GalleryConfig(**filtered_config)

    except Exception as e:
        raise ValueError(f"Error loading config file {config_path}: {e}")


def merge_config_with_cli_args(config: GalleryConfig, **cli_args) -> GalleryConfig:
    """Merge configuration with CLI arguments, giving priority to CLI args."""
    merged_config = {}

    for field_name in GalleryConfig.__dataclass_fields__:
        merged_config[field_name] = getattr(config, field_name)

    # Override with CLI args where provided (not None)
    for key, value in cli_args.items():
        if value is not None:
            merged_config[key] = value

    return GalleryConfig(**merged_config)
