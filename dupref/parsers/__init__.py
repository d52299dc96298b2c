"""Project file parsers."""

from dupref.parsers.base import ProjectParser
from dupref.parsers.msbuild import MSBuildProjectParser

__all__ = ["MSBuildProjectParser", "ProjectParser"]
