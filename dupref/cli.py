"""CLI entry point: dupref.

Usage:
    dupref /path/to/repo
    dupref /path/to/repo "properties:Configuration=Debug;Platform=AnyCPU"
    dupref /path/to/repo --exclude Tests --json

Exit status is 0 when no duplicates were found, 1 when at least one was
found, and 2 when the scan could not start.
"""

from __future__ import annotations

import sys

import click

from dupref.core.config import load_settings
from dupref.core.logging import setup_logging
from dupref.detector import REFERENCE_ITEM_TYPES
from dupref.exceptions import DupRefError
from dupref.properties import parse_properties
from dupref.reporting import ConsoleReporter, JsonReporter
from dupref.scanner import scan

EXIT_CLEAN = 0
EXIT_DUPLICATES = 1
EXIT_ERROR = 2


@click.command()
@click.argument("directory")
@click.argument("properties", required=False)
@click.option(
    "--exclude",
    default=None,
    help="Skip project files whose name contains a match of this regex [env: DUPREF_EXCLUDE]",
)
@click.option(
    "--extension",
    default=None,
    help="Project file extension to scan (default: .csproj) [env: DUPREF_EXTENSION]",
)
@click.option(
    "--item-type",
    "item_types",
    multiple=True,
    help=f"Item type treated as a reference (repeatable, default: {', '.join(REFERENCE_ITEM_TYPES)})",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    directory: str,
    properties: str | None,
    exclude: str | None,
    extension: str | None,
    item_types: tuple[str, ...],
    as_json: bool,
    no_color: bool,
    verbose: bool,
) -> None:
    """Find duplicate references in the MSBuild project files under DIRECTORY.

    PROPERTIES is an optional 'properties:Key=Value;Key=Value' list of global
    properties used when loading the project files.
    """
    settings = load_settings()
    setup_logging("DEBUG" if verbose else settings.log_level, settings.log_format)

    reporter: ConsoleReporter | JsonReporter
    if as_json:
        reporter = JsonReporter()
    else:
        reporter = ConsoleReporter(color=False if no_color else None)

    try:
        global_properties = parse_properties(properties) if properties else {}
        result = scan(
            directory,
            global_properties,
            exclude if exclude is not None else settings.exclude,
            extension=extension or settings.extension,
            reference_types=item_types or REFERENCE_ITEM_TYPES,
            reporter=reporter,
        )
    except DupRefError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)

    if isinstance(reporter, JsonReporter):
        reporter.close(root_directory=result.root_directory)

    sys.exit(EXIT_DUPLICATES if result.total_error_count > 0 else EXIT_CLEAN)


if __name__ == "__main__":
    main()
