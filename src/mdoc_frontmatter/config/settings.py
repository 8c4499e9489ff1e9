"""
Configuration management for mdoc-frontmatter.

Handles environment variables and ``.env`` loading, and provides default
settings with validation for the frontmatter parser, the content entry
parser and logging.
"""

import logging.config
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mdoc_frontmatter.models.exceptions import ConfigurationError
from mdoc_frontmatter.models.frontmatter import FrontmatterMode


class LogLevel(str, Enum):
    """Logging level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class FrontmatterConfig(BaseSettings):
    """
    Central configuration class for mdoc-frontmatter.

    Every option can be overridden through an ``MDOC_FRONTMATTER_`` prefixed
    environment variable or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MDOC_FRONTMATTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Parsing Configuration ===
    default_mode: FrontmatterMode = Field(
        default=FrontmatterMode.REMOVE, description="Default frontmatter handling for parsed content"
    )
    file_encoding: str = Field(default="utf-8", min_length=1, description="Encoding used to read content files")
    max_file_size_mb: int = Field(default=10, ge=1, le=100, description="Maximum file size to process (MB)")
    entry_extensions: list[str] = Field(default=[".mdoc"], description="File extensions loaded as content entries")

    # === Logging Configuration ===
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    log_file: Path | None = Field(default=None, description="Log file path (stderr if None)")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s", description="Log message format"
    )

    @field_validator('entry_extensions')
    @classmethod
    def validate_entry_extensions(cls, v):
        """Ensure entry extensions start with a dot and are lowercase."""
        if not v:
            raise ConfigurationError(
                "entry_extensions must not be empty",
                config_key="entry_extensions",
                expected_type="non-empty list[str]",
                actual_value=v,
            )
        validated = []
        for ext in v:
            if not ext.startswith('.'):
                ext = f'.{ext}'
            validated.append(ext.lower())
        return validated

    @property
    def max_file_size_bytes(self) -> int:
        """Maximum file size in bytes."""
        return self.max_file_size_mb * 1024 * 1024

    def is_entry_file(self, file_path: str | Path) -> bool:
        """Check if a file is loaded as a content entry."""
        extension = Path(file_path).suffix.lower()
        return extension in self.entry_extensions

    def get_log_config(self) -> dict[str, Any]:
        """Get logging configuration dictionary."""
        config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"standard": {"format": self.log_format}},
            "handlers": {
                "default": {
                    "level": self.log_level.value,
                    "formatter": "standard",
                    "class": "logging.StreamHandler" if not self.log_file else "logging.FileHandler",
                }
            },
            "loggers": {
                "mdoc_frontmatter": {"handlers": ["default"], "level": self.log_level.value, "propagate": False}
            },
        }

        if self.log_file:
            config["handlers"]["default"]["filename"] = str(self.log_file)

        return config


# Global configuration instance
_config: FrontmatterConfig | None = None


def get_config() -> FrontmatterConfig:
    """
    Get the global configuration instance.

    Creates a new instance on first call and reuses it for subsequent calls.
    """
    global _config
    if _config is None:
        _config = FrontmatterConfig()
    return _config


def reload_config() -> FrontmatterConfig:
    """
    Force reload the configuration from environment/files.

    Useful for testing or when configuration needs to be updated at runtime.
    """
    global _config
    _config = FrontmatterConfig()
    return _config


def set_config(config: FrontmatterConfig | None) -> None:
    """
    Set a custom configuration instance.

    Passing ``None`` clears it so the next ``get_config`` call rebuilds it.
    """
    global _config
    _config = config


def configure_logging(config: FrontmatterConfig | None = None) -> None:
    """Apply the logging configuration to the ``mdoc_frontmatter`` logger tree."""
    config = config or get_config()
    logging.config.dictConfig(config.get_log_config())
