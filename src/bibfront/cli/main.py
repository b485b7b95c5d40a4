"""Command-line interface for bibfront.

Provides CLI commands for converting BibTeX files to front matter.
"""

import importlib.metadata
import sys
from pathlib import Path
from typing import TextIO

import click

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("bibfront")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development


@click.group()
@click.version_option(version=__version__, prog_name="bibfront")
def cli() -> None:
    """Convert BibTeX bibliographies into front-matter documents.

    Use 'bibfront COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument(
    "input_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--file-path",
    "-f",
    type=click.Path(dir_okay=False, path_type=Path),
    help="The path of the BibTeX file (alternative to INPUT_PATH)",
)
@click.option(
    "--output",
    "-o",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Output file (default: standard output)",
)
@click.option(
    "--skip-invalid",
    is_flag=True,
    help="Skip entries missing a mandatory field instead of stopping",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write JSONL audit events to this file",
)
@click.option(
    "--encoding",
    type=str,
    default=None,
    help="Input encoding (default: detected)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def convert(
    input_path: Path | None,
    file_path: Path | None,
    output: TextIO,
    skip_invalid: bool,
    log_file: Path | None,
    encoding: str | None,
    verbose: bool,
) -> None:
    """Convert the entries of a BibTeX file to front-matter blocks.

    One block is written per entry, in file order. By default the run stops
    at the first entry missing author, title, url, venue or year.

    Examples
    --------
        bibfront convert papers.bib
        bibfront convert -f papers.bib -o papers.md --skip-invalid
    """
    from bibfront.engine import ConvertConfig, run_conversion
    from bibfront.parse import ParseError

    if input_path is not None and file_path is not None:
        click.secho("Error: give the file either as INPUT_PATH or --file-path", fg="red", err=True)
        sys.exit(1)

    source = input_path or file_path
    if source is None:
        click.secho("No file provided", fg="red", err=True)
        sys.exit(1)

    try:
        config = ConvertConfig(skip_invalid=skip_invalid, log_path=log_file, encoding=encoding)
    except ValueError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Processing: {source}", err=True)

    try:
        result = run_conversion(source, output, config)
    except (OSError, ParseError) as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    if verbose:
        for message in result.warnings:
            click.echo(f"Warning: {message}", err=True)
        click.echo(
            f"Rendered {result.rendered} of {result.total_entries} entries",
            err=True,
        )

    for _, message in result.failed:
        label = "Skipped" if skip_invalid else "Error"
        click.secho(f"{label}: {message}", fg="yellow" if skip_invalid else "red", err=True)

    if not result.success:
        sys.exit(1)


if __name__ == "__main__":
    cli()
