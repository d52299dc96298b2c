"""DuplicateDetector — count reference declarations per project file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping, Sequence

import structlog

from dupref.exceptions import ProjectParseError
from dupref.identity import CaseInsensitiveCounter
from dupref.models import DeclaredItem, FileReport, ScanResult, ScanSummary, SkippedFile
from dupref.parsers import MSBuildProjectParser, ProjectParser
from dupref.reporting import NullReporter, ScanReporter

log = structlog.get_logger("dupref.detector")

REFERENCE_ITEM_TYPES: tuple[str, ...] = ("Reference",)


class DuplicateDetector:
    """Find references declared more than once within the same project file.

    Usage::

        detector = DuplicateDetector(properties={"Configuration": "Debug"})
        result = detector.detect(select_project_files(root), root_directory=root)
        sys.exit(1 if detector.error_count else 0)

    Each file is analysed on its own. A file that fails to parse is logged,
    recorded in :attr:`ScanResult.skipped_files` and otherwise ignored.
    """

    def __init__(
        self,
        parser: ProjectParser | None = None,
        properties: Mapping[str, str] | None = None,
        reporter: ScanReporter | None = None,
        reference_types: Sequence[str] = REFERENCE_ITEM_TYPES,
    ) -> None:
        self._parser = parser or MSBuildProjectParser()
        self._properties = dict(properties or {})
        self._reporter = reporter or NullReporter()
        self._reference_types = frozenset(reference_types)
        self._result = ScanResult()

    @property
    def error_count(self) -> int:
        """Duplicate count of the most recent :meth:`detect` run."""
        return self._result.total_error_count

    @property
    def result(self) -> ScanResult:
        return self._result

    def count_references(self, items: Iterable[DeclaredItem]) -> CaseInsensitiveCounter:
        """Count reference items by identity, ignoring every other item type."""
        counter = CaseInsensitiveCounter()
        for item in items:
            if item.item_type in self._reference_types:
                counter.add(item.raw_identity)
        return counter

    def examine_file(self, file_path: str | Path) -> FileReport | None:
        """Analyse one project file.

        Returns:
            A FileReport when the file declares at least one duplicate,
            otherwise None.

        Raises:
            ProjectParseError: the parser could not read the file.
        """
        items = self._parser.parse(Path(file_path), self._properties)
        counter = self.count_references(items)
        if not counter.duplicates():
            return None
        return FileReport(file_path=str(file_path), occurrence_counts=counter.as_dict())

    def detect(
        self, files: Iterable[str | Path], root_directory: str | Path | None = None
    ) -> ScanResult:
        """Examine *files* in order and accumulate a ScanResult.

        Each duplicate report is handed to the reporter as soon as it is
        built; the summary follows once every file has been examined, and
        only when duplicates were found.
        """
        result = ScanResult(root_directory=str(root_directory) if root_directory else None)
        self._result = result

        for file_path in files:
            result.files_examined += 1
            try:
                report = self.examine_file(file_path)
            except ProjectParseError as e:
                log.warning("detector.parse_failed", file=str(file_path), reason=e.reason)
                result.skipped_files.append(SkippedFile(file_path=str(file_path), reason=e.reason))
                continue
            except Exception as e:
                reason = f"{type(e).__name__}: {e}"
                log.warning(
                    "detector.parse_failed", file=str(file_path), reason=reason, exc_info=True
                )
                result.skipped_files.append(SkippedFile(file_path=str(file_path), reason=reason))
                continue

            if report is None:
                log.debug("detector.clean", file=str(file_path))
                continue

            result.file_reports.append(report)
            result.total_error_count += report.error_count
            log.info(
                "detector.duplicates_found",
                file=report.file_path,
                duplicates=report.duplicate_identities,
                errors=report.error_count,
            )
            self._reporter.file_report(report)

        if result.total_error_count > 0:
            self._reporter.summary(
                ScanSummary(
                    total_error_count=result.total_error_count,
                    root_directory=result.root_directory,
                    files_affected=result.files_with_duplicates,
                )
            )
        return result
