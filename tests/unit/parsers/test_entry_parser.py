"""
Unit tests for ContentEntryParser.

Tests loading content entries from strings and files, slug resolution,
file validation and error propagation.
"""

import pytest

from mdoc_frontmatter.config.settings import FrontmatterConfig
from mdoc_frontmatter.models.entry import ContentEntry
from mdoc_frontmatter.models.exceptions import EntryLoadingError, FrontmatterParsingError
from mdoc_frontmatter.parsers.entry_parser import ContentEntryParser

ENTRY_SOURCE = """---
title: Getting Started
slug: getting-started
tags: [intro, docs]
---
# Getting Started

{% callout type="note" %}
Welcome!
{% /callout %}
"""


class TestContentEntryParser:
    """Test cases for ContentEntryParser."""

    def setup_method(self):
        """Set up test fixtures."""
        self.config = FrontmatterConfig()
        self.parser = ContentEntryParser(self.config)

    def test_parse_string(self):
        """Test building an entry from source text."""
        entry = self.parser.parse_string(ENTRY_SOURCE)

        assert isinstance(entry, ContentEntry)
        assert entry.data == {"title": "Getting Started", "slug": "getting-started", "tags": ["intro", "docs"]}
        assert entry.slug == "getting-started"
        assert entry.raw_data == "\ntitle: Getting Started\nslug: getting-started\ntags: [intro, docs]\n"
        assert entry.body.startswith("\n# Getting Started\n")
        assert entry.file_path is None
        assert entry.title == "Getting Started"

    def test_parse_string_without_frontmatter(self):
        """Test entries without frontmatter keep the whole source as body."""
        entry = self.parser.parse_string("# Plain\n")

        assert entry.data == {}
        assert entry.raw_data == ""
        assert entry.body == "# Plain\n"
        assert entry.slug is None
        assert entry.title is None

    def test_slug_falls_back_to_file_stem(self):
        """Test the file name is used when there is no slug."""
        entry = self.parser.parse_string("---\ntitle: Intro\n---\nBody", file_path="docs/intro-page.mdoc")

        assert entry.slug == "intro-page"
        assert entry.file_path == "docs/intro-page.mdoc"

    def test_blank_slug_falls_back_to_file_stem(self):
        """Test a blank slug is treated as missing."""
        entry = self.parser.parse_string("---\nslug: '  '\n---\nBody", file_path="about.mdoc")

        assert entry.slug == "about"

    def test_non_string_slug(self):
        """Test a non-string slug is rejected."""
        with pytest.raises(EntryLoadingError) as exc_info:
            self.parser.parse_string("---\nslug: 42\n---\nBody", file_path="numbers.mdoc")

        assert exc_info.value.context["loading_stage"] == "slug"
        assert exc_info.value.context["file_path"] == "numbers.mdoc"

    def test_body_uses_configured_mode(self):
        """Test the body honours the configured frontmatter mode."""
        parser = ContentEntryParser(FrontmatterConfig(default_mode="empty-with-spaces"))

        entry = parser.parse_string(ENTRY_SOURCE)

        assert len(entry.body) == len(ENTRY_SOURCE)
        assert entry.body.count("\n") == ENTRY_SOURCE.count("\n")
        assert entry.body.endswith("# Getting Started\n\n{% callout type=\"note\" %}\nWelcome!\n{% /callout %}\n")

    def test_parse_file(self, tmp_path):
        """Test loading an entry from disk."""
        file_path = tmp_path / "getting-started.mdoc"
        file_path.write_text(ENTRY_SOURCE, encoding="utf-8")

        entry = self.parser.parse_file(file_path)

        assert entry.slug == "getting-started"
        assert entry.file_path == str(file_path)
        assert entry.data["tags"] == ["intro", "docs"]

    def test_parse_file_extension_is_case_insensitive(self, tmp_path):
        """Test upper-case extensions are supported."""
        file_path = tmp_path / "README.MDOC"
        file_path.write_text("Body", encoding="utf-8")

        entry = self.parser.parse_file(file_path)

        assert entry.slug == "README"
        assert entry.body == "Body"

    def test_parse_nonexistent_file(self, tmp_path):
        """Test loading a missing file raises EntryLoadingError."""
        missing = tmp_path / "missing.mdoc"

        with pytest.raises(EntryLoadingError) as exc_info:
            self.parser.parse_file(missing)

        assert "does not exist" in str(exc_info.value)
        assert exc_info.value.context["file_path"] == str(missing)

    def test_parse_unsupported_file(self, tmp_path):
        """Test files with other extensions are rejected."""
        file_path = tmp_path / "notes.txt"
        file_path.write_text("---\ntitle: Notes\n---\n", encoding="utf-8")

        assert self.parser.is_supported(file_path) is False
        with pytest.raises(EntryLoadingError) as exc_info:
            self.parser.parse_file(file_path)

        assert "Unsupported" in str(exc_info.value)

    def test_parse_file_with_custom_extensions(self, tmp_path):
        """Test configured extensions are loaded."""
        parser = ContentEntryParser(FrontmatterConfig(entry_extensions=["md", ".mdoc"]))
        file_path = tmp_path / "notes.md"
        file_path.write_text("---\ntitle: Notes\n---\nBody", encoding="utf-8")

        assert parser.is_supported(file_path) is True
        assert parser.parse_file(file_path).data == {"title": "Notes"}

    def test_parse_file_too_large(self, tmp_path):
        """Test files above the size limit are rejected."""
        parser = ContentEntryParser(FrontmatterConfig(max_file_size_mb=1))
        file_path = tmp_path / "huge.mdoc"
        file_path.write_text("x" * (1024 * 1024 + 1), encoding="utf-8")

        with pytest.raises(EntryLoadingError) as exc_info:
            parser.parse_file(file_path)

        assert "too large" in str(exc_info.value)

    def test_parse_file_unreadable(self, tmp_path):
        """Test undecodable files raise EntryLoadingError with the read error as cause."""
        file_path = tmp_path / "binary.mdoc"
        file_path.write_bytes(b"\xff\xfe\x00bad")

        with pytest.raises(EntryLoadingError) as exc_info:
            self.parser.parse_file(file_path)

        assert exc_info.value.context["loading_stage"] == "file_read"
        assert exc_info.value.cause is not None

    def test_parse_file_malformed_frontmatter(self, tmp_path):
        """Test YAML errors keep their type and carry the file path."""
        file_path = tmp_path / "broken.mdoc"
        file_path.write_text("---\ntitle: [unclosed\n---\nBody", encoding="utf-8")

        with pytest.raises(FrontmatterParsingError) as exc_info:
            self.parser.parse_file(file_path)

        assert exc_info.value.context["file_path"] == str(file_path)

    def test_parse_file_keeps_crlf_line_breaks(self, tmp_path):
        """Test entry bodies keep the file's CRLF line breaks and positions."""
        source = b"---\r\ntitle: Hi\r\n---\r\nBody\r\n"
        file_path = tmp_path / "windows.mdoc"
        file_path.write_bytes(source)
        parser = ContentEntryParser(FrontmatterConfig(default_mode="empty-with-spaces"))

        entry = parser.parse_file(file_path)

        assert len(entry.body) == len(source)
        assert entry.body.endswith("\r\nBody\r\n")
        assert entry.raw_data == "\r\ntitle: Hi\r\n"

    def test_parse_file_impossible_date(self, tmp_path):
        """Test invalid timestamps fail as frontmatter errors naming the file."""
        file_path = tmp_path / "dated.mdoc"
        file_path.write_text("---\npublished: 2024-02-30\n---\nBody", encoding="utf-8")

        with pytest.raises(FrontmatterParsingError) as exc_info:
            self.parser.parse_file(file_path)

        assert str(file_path) in exc_info.value.message
        assert exc_info.value.context["file_path"] == str(file_path)
