"""
Custom exception classes for frontmatter processing.

Provides specific exception types for the failure categories of the
frontmatter processor and content entry loading so callers can tell
malformed metadata apart from configuration and file access problems.
"""

from typing import Any

import yaml


class BaseError(Exception):
    """
    Base exception class for all mdoc-frontmatter errors.

    All custom exceptions in the package inherit from this base class
    to enable consistent error handling and logging.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        """
        Initialize the error.

        Args:
            message: Human-readable error description
            error_code: Optional error code for programmatic handling
            context: Optional dictionary with error context information
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation including error code if present."""
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}', "
            f"context={self.context})"
        )


class ConfigurationError(BaseError):
    """Raised when settings or parse options are invalid."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        expected_type: str | None = None,
        actual_value: Any | None = None,
    ):
        context = {}
        if config_key:
            context["config_key"] = config_key
        if expected_type:
            context["expected_type"] = expected_type
        if actual_value is not None:
            context["actual_value"] = str(actual_value)

        super().__init__(message, error_code="CONFIG_ERROR", context=context)


class FrontmatterParsingError(BaseError, yaml.YAMLError):
    """
    Raised when the frontmatter block is not valid YAML.

    Also a ``yaml.YAMLError`` so code that catches the YAML parser's own
    error type keeps working. The original parser error is kept as ``cause``
    and chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        column_number: int | None = None,
        file_path: str | None = None,
        underlying_error: Exception | None = None,
    ):
        context = {}
        if line_number is not None:
            context["line_number"] = line_number
        if column_number is not None:
            context["column_number"] = column_number
        if file_path:
            context["file_path"] = file_path

        super().__init__(message, error_code="FRONTMATTER_ERROR", context=context, cause=underlying_error)


class DocumentParsingError(BaseError):
    """Raised when a document file cannot be read for parsing."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        parsing_stage: str | None = None,
        underlying_error: Exception | None = None,
    ):
        context = {}
        if file_path:
            context["file_path"] = file_path
        if parsing_stage:
            context["parsing_stage"] = parsing_stage

        super().__init__(message, error_code="PARSING_ERROR", context=context, cause=underlying_error)


class EntryLoadingError(BaseError):
    """Raised when a content entry file cannot be loaded."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        stage: str | None = None,
        underlying_error: Exception | None = None,
    ):
        context = {}
        if file_path:
            context["file_path"] = file_path
        if stage:
            context["loading_stage"] = stage

        super().__init__(
            message,
            error_code="ENTRY_ERROR",
            context=context,
            cause=underlying_error,
        )

