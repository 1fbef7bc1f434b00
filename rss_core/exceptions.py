"""
Exceptions
==========

Fatal errors raised by the library. Rule failures found while validating a
document are never raised; they are collected as violations and returned
in a ValidationResult.
"""

from typing import Optional


class RSSCoreError(Exception):
    """Base class for all rss_core errors."""


class FeedParseError(RSSCoreError):
    """
    Raised when the XML collaborator rejects the input as malformed.

    Attributes:
        line: Line number reported by the tokenizer (if known)
        column: Column number reported by the tokenizer (if known)
    """

    def __init__(self, message: str,
                 line: Optional[int] = None,
                 column: Optional[int] = None):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class UnknownElementError(RSSCoreError):
    """Raised when a document root has no matching element class."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"No element class registered for <{tag}>")


class FieldAbsentError(RSSCoreError, LookupError):
    """Raised when unwrapping a field that is absent from the source."""
