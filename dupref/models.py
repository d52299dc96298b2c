"""Data models for duplicate reference detection."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DeclaredItem:
    """A single item declared in a project file."""

    item_type: str
    raw_identity: str


@dataclass
class FileReport:
    """Reference occurrence counts for one project file."""

    file_path: str
    occurrence_counts: dict[str, int] = field(default_factory=dict)

    @property
    def duplicate_identities(self) -> list[str]:
        return [name for name, count in self.occurrence_counts.items() if count > 1]

    @property
    def has_duplicates(self) -> bool:
        return any(count > 1 for count in self.occurrence_counts.values())

    @property
    def error_count(self) -> int:
        """Occurrences beyond the first, summed over every duplicated identity."""
        return sum(count - 1 for count in self.occurrence_counts.values() if count > 1)


@dataclass
class SkippedFile:
    """A project file that could not be parsed."""

    file_path: str
    reason: str


@dataclass
class ScanSummary:
    """Final summary emitted when a scan found duplicates."""

    total_error_count: int
    root_directory: str | None
    files_affected: int


@dataclass
class ScanResult:
    """Result of a full scan over a directory tree."""

    root_directory: str | None = None
    total_error_count: int = 0
    files_examined: int = 0
    file_reports: list[FileReport] = field(default_factory=list)
    skipped_files: list[SkippedFile] = field(default_factory=list)

    @property
    def files_with_duplicates(self) -> int:
        return len(self.file_reports)
