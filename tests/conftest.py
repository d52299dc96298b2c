"""Shared pytest fixtures for dupref tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import pytest

MSBUILD_NS = "http://schemas.microsoft.com/developer/msbuild/2003"


def project_xml(references: list[str], extra: str = "", sdk: bool = False) -> str:
    """Render a minimal project file declaring *references*."""
    refs = "\n".join(f'    <Reference Include="{r}" />' for r in references)
    opening = '<Project Sdk="Microsoft.NET.Sdk">' if sdk else f'<Project ToolsVersion="14.0" xmlns="{MSBUILD_NS}">'
    return f"""<?xml version="1.0" encoding="utf-8"?>
{opening}
  <ItemGroup>
{refs}
  </ItemGroup>
{extra}
</Project>
"""


@pytest.fixture
def write_project() -> Callable[..., Path]:
    """Write a project file and return its path."""

    def _write(path: Path, references: list[str], extra: str = "", sdk: bool = False) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(project_xml(references, extra, sdk))
        return path

    return _write


@pytest.fixture(autouse=True)
def _drop_log_handlers():
    """CLI runs bind a handler to CliRunner's stderr; detach it afterwards."""
    yield
    logging.getLogger("dupref").handlers.clear()
