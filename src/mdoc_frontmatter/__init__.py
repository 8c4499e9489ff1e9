"""
mdoc-frontmatter: frontmatter extraction and offset-preserving content reconstruction.

Parses the YAML frontmatter block at the start of a document and returns the
document content with that block kept, removed, or blanked out so positions
in the content still map back to the source.
"""

from mdoc_frontmatter.models import (
    BaseError,
    ConfigurationError,
    ContentEntry,
    DocumentParsingError,
    EntryLoadingError,
    FrontmatterMode,
    FrontmatterParsingError,
    ParseFrontmatterOptions,
    ParseFrontmatterResult,
)
from mdoc_frontmatter.parsers import (
    ContentEntryParser,
    FrontmatterParser,
    extract_frontmatter,
    is_frontmatter_valid,
    parse_frontmatter,
)

__version__ = "0.1.0"

__all__ = [
    "parse_frontmatter",
    "extract_frontmatter",
    "is_frontmatter_valid",
    "FrontmatterParser",
    "ContentEntryParser",
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
