"""Project file selection — walk a directory tree and filter project files."""

from __future__ import annotations

import re
from pathlib import Path

import structlog

from dupref.exceptions import DirectoryNotFoundError, InvalidPatternError

log = structlog.get_logger("dupref.selector")

PROJECT_FILE_EXTENSION = ".csproj"


def compile_exclude(pattern: str | re.Pattern[str] | None) -> re.Pattern[str] | None:
    """Compile an exclusion pattern, raising InvalidPatternError on bad syntax."""
    if pattern is None or isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def select_project_files(
    root: str | Path,
    exclude: str | re.Pattern[str] | None = None,
    extension: str = PROJECT_FILE_EXTENSION,
) -> list[Path]:
    """Collect every project file under *root*.

    Files are matched by *extension* (case-insensitively) and dropped when
    *exclude* matches anywhere in their base name.

    Returns:
        Absolute paths, sorted.

    Raises:
        DirectoryNotFoundError: *root* is missing or not a directory.
        InvalidPatternError: *exclude* does not compile.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise DirectoryNotFoundError(str(root))

    pattern = compile_exclude(exclude)
    suffix = extension.lower()

    selected: list[Path] = []
    for hit in sorted(root_path.resolve().rglob("*")):
        if not hit.name.lower().endswith(suffix) or not hit.is_file():
            continue
        if pattern is not None and pattern.search(hit.name):
            log.debug("selector.excluded", file=str(hit), pattern=pattern.pattern)
            continue
        selected.append(hit)

    log.debug("selector.done", root=str(root_path), count=len(selected))
    return selected
