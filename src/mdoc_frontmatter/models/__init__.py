"""Data models and exceptions for frontmatter processing."""

from mdoc_frontmatter.models.entry import ContentEntry
from mdoc_frontmatter.models.exceptions import (
    BaseError,
    ConfigurationError,
    DocumentParsingError,
    EntryLoadingError,
    FrontmatterParsingError,
)
from mdoc_frontmatter.models.frontmatter import FrontmatterMode, ParseFrontmatterOptions, ParseFrontmatterResult

__all__ = [
    "ContentEntry",
    "FrontmatterMode",
    "ParseFrontmatterOptions",
    "ParseFrontmatterResult",
    "BaseError",
    "ConfigurationError",
    "DocumentParsingError",
    "EntryLoadingError",
    "FrontmatterParsingError",
]
