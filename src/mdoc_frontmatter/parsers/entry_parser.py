"""
Content entry parser for frontmatter documents.

Loads content files (``.mdoc`` by default) and splits them into the entry
information a content collection needs: parsed data, body, slug and the raw
frontmatter text.
"""

import logging
from pathlib import Path

from mdoc_frontmatter.config.settings import FrontmatterConfig, get_config
from mdoc_frontmatter.models.entry import ContentEntry
from mdoc_frontmatter.models.exceptions import DocumentParsingError, EntryLoadingError
from mdoc_frontmatter.parsers.frontmatter_parser import FrontmatterParser

logger = logging.getLogger(__name__)


class ContentEntryParser:
    """
    Parser for content entry files with frontmatter support.

    Uses FrontmatterParser with the configured default mode for the body.
    """

    def __init__(self, config: FrontmatterConfig | None = None):
        """Initialize the entry parser with configuration."""
        self.config = config or get_config()
        self.frontmatter_parser = FrontmatterParser(self.config)

    def is_supported(self, file_path: str | Path) -> bool:
        """Check if a file is loaded as a content entry."""
        return self.config.is_entry_file(file_path)

    def parse_file(self, file_path: str | Path) -> ContentEntry:
        """
        Load a content entry from a file.

        Args:
            file_path: Path to the entry file

        Returns:
            ContentEntry for the file

        Raises:
            EntryLoadingError: If the file is missing, unsupported, too large or unreadable
            FrontmatterParsingError: If the frontmatter is not valid YAML
        """
        file_path = Path(file_path)
        logger.debug("Loading content entry %s", file_path)

        if not file_path.is_file():
            raise EntryLoadingError(
                f"Entry file does not exist: {file_path}", file_path=str(file_path), stage="file_validation"
            )

        if not self.is_supported(file_path):
            raise EntryLoadingError(
                f"Unsupported entry file type: {file_path.suffix or '<none>'}",
                file_path=str(file_path),
                stage="file_validation",
            )

        file_size = file_path.stat().st_size
        if file_size > self.config.max_file_size_bytes:
            raise EntryLoadingError(
                f"Entry file too large: {file_size} bytes (max {self.config.max_file_size_mb}MB)",
                file_path=str(file_path),
                stage="file_validation",
            )

        try:
            contents = self.frontmatter_parser.read_document(file_path)
        except DocumentParsingError as e:
            raise EntryLoadingError(
                f"Failed to read entry file {file_path}: {e.message}",
                file_path=str(file_path),
                stage="file_read",
                underlying_error=e,
            ) from e

        return self.parse_string(contents, file_path)

    def parse_string(self, contents: str, file_path: str | Path | None = None) -> ContentEntry:
        """
        Build a content entry from document source.

        Args:
            contents: Document source with optional frontmatter
            file_path: Optional source path, used for the fallback slug

        Returns:
            ContentEntry for the contents

        Raises:
            EntryLoadingError: If the frontmatter slug is not a string
            FrontmatterParsingError: If the frontmatter is not valid YAML
        """
        path_str = str(file_path) if file_path is not None else None
        result = self.frontmatter_parser.parse_string(contents, file_path=path_str)

        slug = self._resolve_slug(result.frontmatter, file_path)

        entry = ContentEntry(
            data=result.frontmatter,
            body=result.content,
            slug=slug,
            raw_data=result.raw_frontmatter,
            file_path=path_str,
        )
        logger.debug("Loaded content entry %s with %d data keys", slug or "<no slug>", len(entry.data))
        return entry

    def _resolve_slug(self, data: dict, file_path: str | Path | None) -> str | None:
        slug = data.get("slug")

        if slug is not None and not isinstance(slug, str):
            raise EntryLoadingError(
                f"Frontmatter slug must be a string, got {type(slug).__name__}",
                file_path=str(file_path) if file_path is not None else None,
                stage="slug",
            )

        if slug and slug.strip():
            return slug.strip()

        if file_path is not None:
            return Path(file_path).stem

        return None
