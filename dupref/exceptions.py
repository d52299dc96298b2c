"""Custom exceptions for dupref."""

from __future__ import annotations


class DupRefError(Exception):
    """Base exception for all dupref errors."""


class DirectoryNotFoundError(DupRefError):
    """Raised when the root directory to scan does not exist."""

    def __init__(self, directory: str):
        self.directory = directory
        super().__init__(f"Directory {directory} does not exist")


class InvalidPatternError(DupRefError):
    """Raised when the exclusion pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"Invalid exclusion pattern {pattern!r}: {reason}")


class ProjectParseError(DupRefError):
    """Raised when a project file cannot be read or evaluated."""

    def __init__(self, file_path: str, reason: str):
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"{file_path}: {reason}")


class PropertiesFormatError(DupRefError):
    """Raised when a ``properties:`` argument is malformed."""
