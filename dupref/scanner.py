"""Standalone scan entry point — select project files, then detect duplicates."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Mapping, Sequence

from dupref.detector import REFERENCE_ITEM_TYPES, DuplicateDetector
from dupref.models import ScanResult
from dupref.parsers import ProjectParser
from dupref.reporting import ScanReporter
from dupref.selector import PROJECT_FILE_EXTENSION, select_project_files


def scan(
    root: str | Path,
    properties: Mapping[str, str] | None = None,
    exclude: str | re.Pattern[str] | None = None,
    *,
    extension: str = PROJECT_FILE_EXTENSION,
    reference_types: Sequence[str] = REFERENCE_ITEM_TYPES,
    reporter: ScanReporter | None = None,
    parser: ProjectParser | None = None,
) -> ScanResult:
    """Scan every project file under *root* for duplicate references.

    Raises DirectoryNotFoundError or InvalidPatternError before any file is
    examined; per-file parse failures never abort the scan.
    """
    files = select_project_files(root, exclude=exclude, extension=extension)
    detector = DuplicateDetector(
        parser=parser,
        properties=properties,
        reporter=reporter,
        reference_types=reference_types,
    )
    return detector.detect(files, root_directory=Path(root).resolve())
