"""dupref: find duplicate references in MSBuild project files."""

__version__ = "0.1.0"

from dupref.detector import DuplicateDetector
from dupref.exceptions import (
    DirectoryNotFoundError,
    DupRefError,
    InvalidPatternError,
    ProjectParseError,
    PropertiesFormatError,
)
from dupref.identity import CaseInsensitiveCounter, normalize_identity
from dupref.models import DeclaredItem, FileReport, ScanResult, ScanSummary, SkippedFile
from dupref.parsers import MSBuildProjectParser, ProjectParser
from dupref.scanner import scan
from dupref.selector import select_project_files

__all__ = [
    "CaseInsensitiveCounter",
    "DeclaredItem",
    "DirectoryNotFoundError",
    "DupRefError",
    "DuplicateDetector",
    "FileReport",
    "InvalidPatternError",
    "MSBuildProjectParser",
    "ProjectParseError",
    "ProjectParser",
    "PropertiesFormatError",
    "ScanResult",
    "ScanSummary",
    "SkippedFile",
    "normalize_identity",
    "scan",
    "select_project_files",
]
