"""
Data models for frontmatter parsing options and results.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field


class FrontmatterMode(str, Enum):
    """
    How the frontmatter block is represented in the returned content.

    - ``preserve``: keep the block as written.
    - ``remove``: delete the block. Offsets after it shift.
    - ``empty-with-spaces``: blank the block with spaces, keeping line breaks
      (preserves line, column and offset).
    - ``empty-with-lines``: keep only the block's line breaks (preserves line
      numbers of everything after the block).
    """

    PRESERVE = "preserve"
    REMOVE = "remove"
    EMPTY_WITH_SPACES = "empty-with-spaces"
    EMPTY_WITH_LINES = "empty-with-lines"


class ParseFrontmatterOptions(BaseModel):
    """Options accepted by ``parse_frontmatter``."""

    frontmatter: FrontmatterMode = Field(
        default=FrontmatterMode.REMOVE, description="How the frontmatter should be handled in the returned content"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


class ParseFrontmatterResult(BaseModel):
    """
    Result of parsing a document's frontmatter.

    ``frontmatter`` is the parsed mapping (empty when the document has no
    block or the block is not a mapping), ``raw_frontmatter`` the text between
    the delimiters and ``content`` the reconstructed document.
    """

    frontmatter: dict[Any, Any] = Field(default_factory=dict, description="Parsed YAML frontmatter")
    raw_frontmatter: str = Field(default="", description="Raw text between the frontmatter delimiters")
    content: str = Field(..., description="Document content after applying the frontmatter mode")

    @computed_field
    @property
    def has_frontmatter(self) -> bool:
        """Whether a frontmatter block was found in the document."""
        return bool(self.raw_frontmatter)

    def __str__(self) -> str:
        """String representation showing the keys and a content preview."""
        keys = ", ".join(str(key) for key in self.frontmatter)
        preview = self.content[:60] + "..." if len(self.content) > 60 else self.content
        return f"ParseFrontmatterResult(keys=[{keys}], content={preview!r})"

    model_config = ConfigDict(frozen=True)
