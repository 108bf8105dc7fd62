"""Command-line interface for isnkit.

Provides CLI commands for validating, classifying and converting
bibliographic identifiers.
"""

import importlib.metadata
import sys
from pathlib import Path

import click

from isnkit.isn import (
    classify,
    generate_check,
    is_valid_identifier,
    isbn10_to_13,
    isbn13_to_10,
    issn_from_ean13,
    issn_to_ean13,
)

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("isnkit")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development

_CONVERSIONS = ("isbn13", "isbn10", "issn", "ean13")


@click.group()
@click.version_option(version=__version__, prog_name="isnkit")
def cli() -> None:
    """Validate, classify and convert ISBN, ISSN and ISMN identifiers.

    Use 'isnkit COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("identifiers", nargs=-1, required=True)
def validate(identifiers: tuple[str, ...]) -> None:
    """Check the check digit of each IDENTIFIER.

    Prints one line per identifier and exits with status 1 if any is invalid.

    Examples
    --------
        isnkit validate 0805071660 978-0805071665 2434-561X
    """
    all_valid = True
    for identifier in identifiers:
        valid = is_valid_identifier(identifier)
        all_valid = all_valid and valid
        status = click.style("valid", fg="green") if valid else click.style("invalid", fg="red")
        click.echo(f"{identifier}\t{status}")

    if not all_valid:
        sys.exit(1)


@cli.command(name="classify")
@click.argument("identifier")
def classify_command(identifier: str) -> None:
    """Print the type of a valid IDENTIFIER (ISSN, ISBN10, ISBN13, ISMN, ISSNEAN13, OTHER)."""
    try:
        click.echo(str(classify(identifier)))
    except ValueError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)


@cli.command(name="check-digit")
@click.argument("body")
def check_digit(body: str) -> None:
    """Compute the check digit for BODY (7-10 or 12-13 characters)."""
    try:
        click.echo(generate_check(body))
    except ValueError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)


@cli.command()
@click.argument("identifier")
@click.option(
    "--to",
    "target",
    type=click.Choice(_CONVERSIONS),
    required=True,
    help="Target representation",
)
@click.option(
    "--prefix",
    default="978",
    show_default=True,
    help="GS1 prefix for ISBN-10 to ISBN-13 conversion",
)
def convert(identifier: str, target: str, prefix: str) -> None:
    """Convert IDENTIFIER to another representation.

    Examples
    --------
        isnkit convert 0262510871 --to isbn13
        isnkit convert 9772434561006 --to issn
        isnkit convert 2434561X --to ean13
    """
    try:
        if target == "isbn13":
            result = isbn10_to_13(identifier, prefix=prefix)
        elif target == "isbn10":
            result = isbn13_to_10(identifier)
        elif target == "issn":
            result = issn_from_ean13(identifier)
        else:
            result = issn_to_ean13(identifier)
    except ValueError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    click.echo(result)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    required=True,
    help="Output JSONL report path",
)
@click.option(
    "--log",
    "log_path",
    type=click.Path(),
    default=None,
    help="Write JSONL audit events to this path",
)
@click.option(
    "--prefix",
    type=click.Choice(["978", "979"]),
    default="978",
    show_default=True,
    help="GS1 prefix for ISBN-10 to ISBN-13 conversion",
)
@click.option(
    "--no-recover",
    is_flag=True,
    help="Do not try restoring lost leading zeroes",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def batch(
    input_path: str,
    output: str,
    log_path: str | None,
    prefix: str,
    no_recover: bool,
    verbose: bool,
) -> None:
    """Check every identifier in INPUT_PATH and write a JSONL report.

    INPUT_PATH is a text file with one identifier per line. Blank lines and
    lines starting with '#' are skipped.

    Examples
    --------
        isnkit batch identifiers.txt -o report.jsonl
        isnkit batch identifiers.txt -o report.jsonl --log events.jsonl -v
    """
    from isnkit.batch import BatchConfig, run_batch

    if verbose:
        click.echo(f"Checking: {input_path}", err=True)
        click.echo(f"  Output: {output}", err=True)
        if log_path:
            click.echo(f"  Audit log: {log_path}", err=True)

    try:
        config = BatchConfig(
            isbn13_prefix=prefix,
            recover_leading_zeroes=not no_recover,
            output_path=Path(output),
            log_path=Path(log_path) if log_path else None,
        )
        result = run_batch(Path(input_path), config=config)

    except Exception as e:
        click.secho(f"✗ Error: {e}", fg="red", err=True)
        if verbose:
            import traceback

            click.echo(traceback.format_exc(), err=True)
        sys.exit(1)

    if verbose:
        click.echo("\nResults:", err=True)
        click.echo(f"  Total identifiers: {result.total}", err=True)
        click.echo(f"  Recovered (leading zeroes): {result.recovered}", err=True)
        for type_name, count in result.by_type.items():
            click.echo(f"  {type_name}: {count}", err=True)

    click.secho(
        f"✓ Checked {result.total} identifiers ({result.valid} valid, {result.invalid} invalid)",
        fg="green",
    )


if __name__ == "__main__":
    cli()
