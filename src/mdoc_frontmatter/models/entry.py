"""
Data model for content entries loaded from frontmatter documents.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ContentEntry(BaseModel):
    """
    A content file split into its metadata and body.

    ``data`` holds the parsed frontmatter, ``body`` the document content with
    the frontmatter handled according to the configured mode, and
    ``raw_data`` the unparsed frontmatter text.
    """

    data: dict[Any, Any] = Field(default_factory=dict, description="Parsed frontmatter data")
    body: str = Field(..., description="Document body")
    slug: str | None = Field(None, description="Entry slug from frontmatter or file name")
    raw_data: str = Field(default="", description="Raw frontmatter text")
    file_path: str | None = Field(None, description="Source file path if loaded from disk")

    @computed_field
    @property
    def title(self) -> str | None:
        """Get entry title from frontmatter or file name."""
        if title := self.data.get("title"):
            return str(title)
        if self.file_path:
            return Path(self.file_path).stem
        return None

    def __str__(self) -> str:
        """String representation showing slug and body preview."""
        preview = self.body[:100] + "..." if len(self.body) > 100 else self.body
        return f"ContentEntry({self.slug or '<no slug>'}: {preview})"

    model_config = ConfigDict(frozen=True)
