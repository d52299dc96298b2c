"""Parser interface — turn a project file into its declared items."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Protocol, runtime_checkable

from dupref.models import DeclaredItem


@runtime_checkable
class ProjectParser(Protocol):
    """Interface that every project file parser must satisfy.

    Implementations raise :class:`dupref.exceptions.ProjectParseError` when a
    file cannot be read or evaluated.
    """

    def parse(self, file_path: Path, properties: Mapping[str, str]) -> list[DeclaredItem]: ...
