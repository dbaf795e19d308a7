"""
Command-line interface for asana-csv-import.

Reads an Asana CSV export, maps it to an import document and writes the
document as JSON for the destination importer.
"""

import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .constants import DEFAULT_ENCODING, StatusSource
from .converter import ConversionResult, RecordMapper
from .exceptions import AsanaImportError
from .markup import identity_markup, to_target_markup
from .reader import read_records


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _read_or_exit(csv_file: Path, encoding: str) -> list[dict[str, str]]:
    try:
        return read_records(csv_file, encoding=encoding)
    except AsanaImportError as e:
        click.echo(click.style(f"Error reading export: {e}", fg="red"), err=True)
        sys.exit(1)


def _echo_problems(result: ConversionResult) -> None:
    for warning in result.warnings:
        click.echo(click.style(f"  Warning: {warning}", fg="yellow"), err=True)
    for error in result.errors:
        click.echo(click.style(f"  Error: {error}", fg="red"), err=True)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """
    Asana CSV Import.

    Convert an Asana CSV export into an import document of issues,
    users and labels.
    """
    pass


@main.command()
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--org-url",
    envvar="ASANA_ORG_URL",
    help="Base Asana project URL; task ids are appended to build back-links",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output JSON file (default: <CSV_FILE stem>.import.json)",
)
@click.option("--compact", is_flag=True, help="Output compact JSON (no indentation)")
@click.option("--dry-run", is_flag=True, help="Map the export but don't write output")
@click.option(
    "--status-from",
    type=click.Choice([s.value for s in StatusSource]),
    default=StatusSource.SECTION.value,
    show_default=True,
    help="Derive status from the board section or from completion",
)
@click.option("--no-markup", is_flag=True, help="Copy notes verbatim instead of converting to Markdown")
@click.option("--encoding", default=DEFAULT_ENCODING, show_default=True, help="CSV file encoding")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def convert(
    csv_file: Path,
    org_url: Optional[str],
    output: Optional[Path],
    compact: bool,
    dry_run: bool,
    status_from: str,
    no_markup: bool,
    encoding: str,
    verbose: bool,
) -> None:
    """Convert an Asana CSV export to an import document.

    Example:

        asana-csv-import convert export.csv --org-url https://app.asana.com/0/1204417431012397/
    """
    _configure_logging(verbose)

    records = _read_or_exit(csv_file, encoding)

    mapper = RecordMapper(
        link_base=org_url,
        markup_converter=identity_markup if no_markup else to_target_markup,
        status_source=status_from,
    )
    result = mapper.map(records)
    document = result.document

    click.echo(click.style(f"Converting: {csv_file.name}", fg="cyan", bold=True))
    click.echo(f"  Records: {result.record_count}")
    click.echo(f"  Issues: {len(document.issues)} ({result.skipped_count} untitled skipped)")
    click.echo(f"  Users: {len(document.users)}")
    click.echo(f"  Labels: {len(document.labels)}")
    if not org_url:
        click.echo("  No --org-url given, back-links omitted")

    _echo_problems(result)

    if dry_run:
        click.echo(click.style("Dry run complete, no files written", fg="cyan"))
        return

    output_path = output or csv_file.with_name(f"{csv_file.stem}.import.json")
    mapper.write_json(result, output_path, indent=None if compact else 2)
    click.echo(click.style(f"Wrote: {output_path}", fg="green"))


@main.command()
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--status-from",
    type=click.Choice([s.value for s in StatusSource]),
    default=StatusSource.SECTION.value,
    show_default=True,
)
@click.option("--encoding", default=DEFAULT_ENCODING, show_default=True, help="CSV file encoding")
def summary(csv_file: Path, status_from: str, encoding: str) -> None:
    """Show what an export would import, without writing anything."""
    records = _read_or_exit(csv_file, encoding)

    result = RecordMapper(markup_converter=identity_markup, status_source=status_from).map(records)
    document = result.document

    click.echo(click.style(f"{csv_file.name}", fg="cyan", bold=True))
    click.echo(f"  Records: {result.record_count}")
    click.echo(f"  Issues: {len(document.issues)}")
    click.echo(f"  Users: {len(document.users)}")
    click.echo(f"  Labels: {len(document.labels)}")

    statuses = Counter(issue.status for issue in document.issues)
    click.echo("  By status:")
    for status, count in sorted(statuses.items()):
        click.echo(f"    {status}: {count}")

    priorities = Counter(issue.priority for issue in document.issues)
    click.echo("  By priority:")
    for priority, count in sorted(priorities.items()):
        click.echo(f"    {priority}: {count}")

    _echo_problems(result)


if __name__ == "__main__":
    main()
