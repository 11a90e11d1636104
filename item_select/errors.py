"""
Errors for item path selectors.

Only selector parsing fails; a search that finds nothing returns an empty list.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from typing import Optional


class SelectorError(ValueError):
    """Base exception for malformed selector paths."""

    def __init__(
        self,
        message: str,
        code: str = None,
        path: Optional[str] = None,
        details: dict = None,
    ):
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            code: Error code for programmatic handling
            path: The path string that failed to parse
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.path = path
        self.details = details or {}


class EmptyPathError(SelectorError):
    """Raised when the path contains no segments."""

    def __init__(self, path: str = "", details: dict = None):
        super().__init__(
            "Path contains no segments", code="EMPTY_PATH", path=path, details=details
        )


class InvalidSegmentError(SelectorError):
    """Raised when a path segment is empty or not a valid identifier."""

    def __init__(self, segment: str, path: Optional[str] = None, details: dict = None):
        """
        Initialize invalid segment error.

        Args:
            segment: The offending segment ("" for a doubled, leading or
                trailing separator)
            path: The full path string
            details: Optional additional details
        """
        if segment:
            message = f"Invalid path segment: {segment!r}"
        else:
            message = "Empty path segment"
        super().__init__(message, code="INVALID_SEGMENT", path=path, details=details)
        self.segment = segment
