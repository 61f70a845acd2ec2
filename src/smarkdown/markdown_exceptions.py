"""
Exceptions raised by the markdown tooling.

The parsing core never raises; these are only used by configuration loading
and the command line tool.
"""

from typing import Any


class MarkdownError(Exception):
    """Base exception for markdown tooling."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class MarkdownConfigError(MarkdownError):
    """Raised when a render configuration cannot be read or is invalid."""
