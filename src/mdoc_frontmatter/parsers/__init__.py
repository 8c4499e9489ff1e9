"""
Parsers package for frontmatter and content entry parsing.

This package provides the frontmatter processor, which extracts and parses
YAML frontmatter and rebuilds document content, and the content entry
parser built on top of it.
"""

from .entry_parser import ContentEntryParser
from .frontmatter_parser import FrontmatterParser, extract_frontmatter, is_frontmatter_valid, parse_frontmatter

__all__ = [
    "ContentEntryParser",
    "FrontmatterParser",
    "extract_frontmatter",
    "is_frontmatter_valid",
    "parse_frontmatter",
]
