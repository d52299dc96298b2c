"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dupref.selector import PROJECT_FILE_EXTENSION


@dataclass
class Settings:
    log_level: str = "WARNING"
    log_format: str = "console"
    extension: str = PROJECT_FILE_EXTENSION
    exclude: str | None = None


def load_settings() -> Settings:
    """Read settings from the environment.

    Environment variables:
        DUPREF_LOG_LEVEL  — log level (default: WARNING)
        DUPREF_LOG_FORMAT — console | json (default: console)
        DUPREF_EXTENSION  — project file extension (default: .csproj)
        DUPREF_EXCLUDE    — default exclusion regex (default: none)
    """
    return Settings(
        log_level=os.environ.get("DUPREF_LOG_LEVEL", "WARNING").upper(),
        log_format=os.environ.get("DUPREF_LOG_FORMAT", "console").lower(),
        extension=os.environ.get("DUPREF_EXTENSION", PROJECT_FILE_EXTENSION),
        exclude=os.environ.get("DUPREF_EXCLUDE") or None,
    )
