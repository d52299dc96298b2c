"""Presentation of scan events — console text, JSON, or nothing."""

from __future__ import annotations

import json
from typing import IO, Any, Protocol, runtime_checkable

import click

from dupref.models import FileReport, ScanSummary


@runtime_checkable
class ScanReporter(Protocol):
    """Receives detection events as the scan progresses."""

    def file_report(self, report: FileReport) -> None: ...

    def summary(self, summary: ScanSummary) -> None: ...


class NullReporter:
    """Discard every event."""

    def file_report(self, report: FileReport) -> None:
        pass

    def summary(self, summary: ScanSummary) -> None:
        pass


class ConsoleReporter:
    """Print each affected file and its duplicates, highlighted in red."""

    def __init__(self, file: IO[str] | None = None, color: bool | None = None) -> None:
        self._file = file
        self._color = color

    def file_report(self, report: FileReport) -> None:
        click.echo(f"File: {report.file_path}", file=self._file)
        for name in report.duplicate_identities:
            click.echo(
                click.style(f"Duplicate Reference Found: {name}", fg="red"),
                file=self._file,
                color=self._color,
            )

    def summary(self, summary: ScanSummary) -> None:
        click.echo(
            f"ERROR: Found {summary.total_error_count} duplicate references "
            f"in directory: {summary.root_directory}",
            file=self._file,
        )


class JsonReporter:
    """Collect events and write a single JSON document on :meth:`close`."""

    def __init__(self, file: IO[str] | None = None) -> None:
        self._file = file
        self._files: list[dict[str, Any]] = []
        self._summary: ScanSummary | None = None

    def file_report(self, report: FileReport) -> None:
        self._files.append(
            {
                "file": report.file_path,
                "duplicates": {
                    name: report.occurrence_counts[name] for name in report.duplicate_identities
                },
            }
        )

    def summary(self, summary: ScanSummary) -> None:
        self._summary = summary

    def close(self, root_directory: str | None = None) -> None:
        doc = {
            "root_directory": self._summary.root_directory if self._summary else root_directory,
            "total_error_count": self._summary.total_error_count if self._summary else 0,
            "files": self._files,
        }
        click.echo(json.dumps(doc, indent=2), file=self._file)
