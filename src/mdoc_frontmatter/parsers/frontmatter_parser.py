"""
Frontmatter parser for extracting YAML metadata from content documents.

A frontmatter block starts at the very first character of a document with a
``---`` delimiter and ends at the next line that starts with ``---``. The text
between the delimiters is parsed as YAML, and the document content is rebuilt
according to a ``FrontmatterMode`` so that positions in the returned content
can still be mapped back to the source.
"""

import json
import logging
import re
from collections.abc import Mapping
from datetime import date
from pathlib import Path
from typing import Any

import yaml
from frontmatter.default_handlers import YAMLHandler
from pydantic import ValidationError

from mdoc_frontmatter.config.settings import FrontmatterConfig, get_config
from mdoc_frontmatter.models.exceptions import ConfigurationError, DocumentParsingError, FrontmatterParsingError
from mdoc_frontmatter.models.frontmatter import FrontmatterMode, ParseFrontmatterOptions, ParseFrontmatterResult

logger = logging.getLogger(__name__)

DELIMITER = "---"

# Anchored to the start of the document; the non-greedy body stops at the
# first line that starts with the closing delimiter.
FRONTMATTER_RE = re.compile(r"\A---(.*?)^---", re.MULTILINE | re.DOTALL)

_NON_LINE_BREAK_RE = re.compile(r"[^\r\n]")

_yaml_handler = YAMLHandler()


def _json_default(value: Any) -> Any:
    # YAML timestamps serialize as ISO strings.
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def is_frontmatter_valid(frontmatter: Any) -> bool:
    """
    Check that frontmatter is a mapping that survives a JSON round trip.

    Args:
        frontmatter: Candidate frontmatter value

    Returns:
        True if the value is a mapping and can be serialized to JSON and back
    """
    if not isinstance(frontmatter, Mapping):
        return False

    try:
        json.loads(json.dumps(dict(frontmatter), allow_nan=False, default=_json_default))
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug("Frontmatter is not JSON-serializable: %s", e)
        return False

    return True


def extract_frontmatter(code: str) -> str | None:
    """
    Extract the raw frontmatter text from the start of a document.

    Args:
        code: Document source

    Returns:
        The text between the delimiters, or None if the document has no frontmatter
    """
    match = FRONTMATTER_RE.match(code)
    if match is None:
        return None
    return match.group(1)


def parse_frontmatter(
    code: str,
    options: ParseFrontmatterOptions | Mapping[str, Any] | str | None = None,
) -> ParseFrontmatterResult:
    """
    Parse the frontmatter of a document and rebuild its content.

    Args:
        code: Document source
        options: ``ParseFrontmatterOptions``, a mapping such as
            ``{"frontmatter": "empty-with-spaces"}``, a mode name, or None
            for the default ``remove`` mode

    Returns:
        ParseFrontmatterResult with the parsed mapping, the raw block text
        and the rebuilt content

    Raises:
        FrontmatterParsingError: If the frontmatter block is not valid YAML
        ConfigurationError: If the options are invalid
    """
    resolved = resolve_options(options)
    return _parse(code, resolved.frontmatter)


def resolve_options(options: ParseFrontmatterOptions | Mapping[str, Any] | str | None) -> ParseFrontmatterOptions:
    """Normalize the accepted option forms into ``ParseFrontmatterOptions``."""
    if options is None:
        return ParseFrontmatterOptions()
    if isinstance(options, ParseFrontmatterOptions):
        return options
    if isinstance(options, str):
        options = {"frontmatter": options}

    try:
        return ParseFrontmatterOptions.model_validate(options)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid frontmatter options: {e}",
            config_key="frontmatter",
            expected_type=" | ".join(mode.value for mode in FrontmatterMode),
            actual_value=options,
        ) from e


def _parse(code: str, mode: FrontmatterMode, file_path: str | None = None) -> ParseFrontmatterResult:
    match = FRONTMATTER_RE.match(code)

    if match is None:
        logger.debug("No frontmatter found in %s", file_path or "string content")
        return ParseFrontmatterResult(frontmatter={}, raw_frontmatter="", content=code)

    raw_frontmatter = match.group(1)
    frontmatter = _load_frontmatter(raw_frontmatter, file_path)
    content = _rebuild_content(code, raw_frontmatter, match.start(), match.end(), mode)

    logger.debug(
        "Parsed frontmatter with %d keys from %s (mode=%s)",
        len(frontmatter),
        file_path or "string content",
        mode.value,
    )
    return ParseFrontmatterResult(frontmatter=frontmatter, raw_frontmatter=raw_frontmatter, content=content)


def _load_frontmatter(raw_frontmatter: str, file_path: str | None = None) -> dict[Any, Any]:
    try:
        parsed = _yaml_handler.load(raw_frontmatter)
    except (yaml.YAMLError, ValueError) as e:
        # SafeLoader raises ValueError for timestamps it cannot build.
        line_number = None
        column_number = None
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            # The raw text starts right after the opening delimiter on line 1.
            line_number = mark.line + 1
            column_number = mark.column + 1 + (len(DELIMITER) if mark.line == 0 else 0)
        raise FrontmatterParsingError(
            f"Failed to parse frontmatter from {file_path or 'string content'}: {e}",
            line_number=line_number,
            column_number=column_number,
            file_path=file_path,
            underlying_error=e,
        ) from e

    if not isinstance(parsed, dict):
        logger.debug(
            "Frontmatter in %s is a %s, not a mapping; using empty frontmatter",
            file_path or "string content",
            type(parsed).__name__,
        )
        return {}

    return parsed


def _rebuild_content(code: str, raw_frontmatter: str, start: int, end: int, mode: FrontmatterMode) -> str:
    if mode == FrontmatterMode.PRESERVE:
        return code

    if mode == FrontmatterMode.REMOVE:
        replacement = ""
    elif mode == FrontmatterMode.EMPTY_WITH_SPACES:
        blank_delimiter = " " * len(DELIMITER)
        replacement = blank_delimiter + _NON_LINE_BREAK_RE.sub(" ", raw_frontmatter) + blank_delimiter
    elif mode == FrontmatterMode.EMPTY_WITH_LINES:
        replacement = _NON_LINE_BREAK_RE.sub("", raw_frontmatter)
    else:
        raise ConfigurationError(f"Unsupported frontmatter mode: {mode}", config_key="frontmatter", actual_value=mode)

    return code[:start] + replacement + code[end:]


class FrontmatterParser:
    """
    Parser for extracting YAML frontmatter from content documents.

    Wraps the module-level functions with the configured default mode and
    adds file loading.
    """

    def __init__(self, config: FrontmatterConfig | None = None):
        """Initialize the frontmatter parser with configuration."""
        self.config = config or get_config()

    @property
    def default_mode(self) -> FrontmatterMode:
        """Frontmatter mode used when none is passed."""
        return self.config.default_mode

    def validate(self, frontmatter: Any) -> bool:
        """Check that frontmatter is a JSON-serializable mapping."""
        return is_frontmatter_valid(frontmatter)

    def extract(self, content: str) -> str | None:
        """Return the raw frontmatter text, or None if there is none."""
        return extract_frontmatter(content)

    def has_frontmatter(self, content: str) -> bool:
        """
        Check if content starts with a frontmatter block.

        Leading whitespace before the opening delimiter is not allowed.
        """
        return FRONTMATTER_RE.match(content) is not None

    def parse_string(
        self, content: str, mode: FrontmatterMode | str | None = None, file_path: str | Path | None = None
    ) -> ParseFrontmatterResult:
        """
        Parse frontmatter from a content string.

        Args:
            content: Document source with optional frontmatter
            mode: Frontmatter mode, defaults to the configured mode
            file_path: Optional source path, used in log and error messages

        Returns:
            ParseFrontmatterResult for the content

        Raises:
            FrontmatterParsingError: If the frontmatter is not valid YAML
            ConfigurationError: If the mode is not a known frontmatter mode
        """
        return _parse(content, self._resolve_mode(mode), str(file_path) if file_path is not None else None)

    def parse_file(self, file_path: str | Path, mode: FrontmatterMode | str | None = None) -> ParseFrontmatterResult:
        """
        Read a document file and parse its frontmatter.

        Args:
            file_path: Path to the document
            mode: Frontmatter mode, defaults to the configured mode

        Returns:
            ParseFrontmatterResult for the file contents

        Raises:
            DocumentParsingError: If the file cannot be read
            FrontmatterParsingError: If the frontmatter is not valid YAML
        """
        file_path = Path(file_path)
        resolved_mode = self._resolve_mode(mode)
        content = self.read_document(file_path)
        return _parse(content, resolved_mode, str(file_path))

    def read_document(self, file_path: Path) -> str:
        """
        Read a document file using the configured encoding.

        Line breaks are returned as stored so offsets match the file.
        """
        try:
            with open(file_path, encoding=self.config.file_encoding, newline="") as f:
                return f.read()
        except FileNotFoundError as e:
            raise DocumentParsingError(
                f"Document file not found: {file_path}",
                file_path=str(file_path),
                parsing_stage="file_validation",
                underlying_error=e,
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentParsingError(
                f"Failed to read document {file_path}: {e}",
                file_path=str(file_path),
                parsing_stage="file_read",
                underlying_error=e,
            ) from e

    def _resolve_mode(self, mode: FrontmatterMode | str | None) -> FrontmatterMode:
        if mode is None:
            return self.default_mode
        return resolve_options(mode).frontmatter
