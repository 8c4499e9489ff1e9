"""Configuration management and settings."""

from mdoc_frontmatter.config.settings import (
    FrontmatterConfig,
    LogLevel,
    configure_logging,
    get_config,
    reload_config,
    set_config,
)

__all__ = ["FrontmatterConfig", "LogLevel", "configure_logging", "get_config", "reload_config", "set_config"]
