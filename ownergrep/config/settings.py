# ownergrep/config/settings.py
"""
ownergrep Configuration Settings

Manages configuration using Pydantic Settings with YAML file support.

The two input files are resolved relative to the directory the search runs
in. Defaults match the usual GitHub layout, so most runs need no config at all.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from ownergrep.core.constants import (
    COMMENT_MARKER,
    DEFAULT_CODEOWNERS_PATH,
    DEFAULT_IGNORE_FILE,
    OWNER_SIGIL,
)


class FileLoggingConfig(BaseModel):
    """File logging configuration."""

    enabled: bool = False
    path: str = "ownergrep.log"
    rotation: str = "10 MB"
    retention: str = "1 week"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: FileLoggingConfig = Field(default_factory=FileLoggingConfig)


class Settings(BaseSettings):
    """
    Main settings class for ownergrep.

    Loads configuration from:
    1. Environment variables (highest priority)
    2. YAML configuration file
    3. Default values (lowest priority)

    Keyword arguments, including everything from_yaml reads, sit in the
    second layer.
    """

    model_config = SettingsConfigDict(
        env_prefix="OWNERGREP_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Input files, relative to the run directory
    codeowners_path: str = DEFAULT_CODEOWNERS_PATH
    ignore_file: str = DEFAULT_IGNORE_FILE

    # File format
    owner_sigil: str = OWNER_SIGIL
    comment_marker: str = COMMENT_MARKER

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # YAML values arrive as init kwargs, so they rank below the environment
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, path: Optional[Path | str]) -> "Settings":
        """
        Load settings from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Settings instance with values from the file
        """
        if path is None:
            return cls()

        path = Path(path)
        if not path.exists():
            return cls()

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    def to_yaml(self, path: Path | str) -> None:
        """
        Save settings to a YAML file.

        Args:
            path: Path to save the configuration file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False, sort_keys=False)


def get_config_path() -> Optional[Path]:
    """
    Return the path to the active settings file, or None if there is none.

    Searches the run directory first, then the user's home.
    """
    candidates = [
        Path(".ownergrep.yaml"),
        Path.home() / ".ownergrep" / "settings.yaml",
    ]
    for path in candidates:
        if path.exists():
            return path
    return None


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance loaded from configuration
    """
    return Settings.from_yaml(get_config_path())


def reload_settings() -> Settings:
    """
    Reload settings from configuration file.

    Returns:
        Fresh Settings instance
    """
    get_settings.cache_clear()
    return get_settings()
