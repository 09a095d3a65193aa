import logging
import sys
from collections.abc import Callable

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from archdate import __version__
from archdate.bib.parser import DateFix, normalize_file
from archdate.dates import UnsupportedFormatError, determine_format, normalize_to_dashed
from archdate.utils.config import Config, load_config


def _configure_logging(level: str, verbose: int) -> None:
    if verbose >= 2:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _values_or_stdin(values: tuple[str, ...]) -> list[str]:
    if values:
        return list(values)
    stream = click.get_text_stream("stdin")
    return [line.rstrip("\r\n") for line in stream if line.strip()]


def _convert_each(values: list[str], convert: Callable[[str], str]) -> int:
    """Echo one converted value per line; return the number of failures."""
    failures = 0
    for value in values:
        try:
            click.echo(convert(value))
        except UnsupportedFormatError as exc:
            failures += 1
            click.echo("")
            click.echo(f"error: {exc}", err=True)
    return failures


@click.group()
@click.version_option(__version__, prog_name="archdate")
@click.option("-v", "--verbose", count=True, help="Log more (-v info, -vv debug).")
@click.pass_context
def main(ctx: click.Context, verbose: int) -> None:
    """Normalize historical date strings to YYYY[-MM[-DD]].

    \b
    Examples:
      archdate normalize "22.04.1712" "ca. 7/1983" "30 Jul 1957"
      archdate format 1983-07-20
      archdate bib --in-place references.bib
    """
    try:
        config = load_config()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    _configure_logging(config.log_level, verbose)
    ctx.obj = config


@main.command()
@click.argument("values", nargs=-1)
@click.pass_context
def normalize(ctx: click.Context, values: tuple[str, ...]) -> None:
    """Print each VALUE in canonical dashed form.

    Reads one value per line from stdin when no VALUE is given.
    """
    if _convert_each(_values_or_stdin(values), normalize_to_dashed):
        ctx.exit(1)


@main.command("format")
@click.argument("values", nargs=-1)
@click.option(
    "--preserve-width/--strict-width",
    default=None,
    help="Repeat M/D once per digit of the original field.",
)
@click.pass_context
def format_(ctx: click.Context, values: tuple[str, ...], preserve_width: bool | None) -> None:
    """Print the layout (YYYY, YYYY-MM, YYYY-MM-DD) of each dashed VALUE."""
    config: Config = ctx.obj
    if preserve_width is None:
        preserve_width = config.preserve_width

    def convert(value: str) -> str:
        return determine_format(value, preserve_width=preserve_width)

    if _convert_each(_values_or_stdin(values), convert):
        ctx.exit(1)


def _report(fixes: list[DateFix]) -> None:
    console = Console(highlight=False)
    rows = [f for f in fixes if f.changed or f.failed]
    if not rows:
        console.print("All date fields are already normalized.")
        return

    table = Table("Entry", "Field", "Original", "Result")
    for fix in rows:
        result = Text(fix.error, style="red") if fix.failed else Text(fix.normalized)
        table.add_row(Text(fix.key), Text(fix.field), Text(fix.original), result)
    console.print(table)
    changed = sum(f.changed for f in fixes)
    failed = sum(f.failed for f in fixes)
    console.print(f"{changed} changed, {failed} unsupported")


@main.command("bib")
@click.argument("bib_file", type=click.Path(exists=True, readable=True, dir_okay=False))
@click.option("-f", "--field", "fields", multiple=True, help="Date field to normalize (repeatable).")
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Write the result here.")
@click.option("--in-place", is_flag=True, help="Rewrite BIB_FILE.")
@click.option("--check", is_flag=True, help="Exit 1 if any field would change or is unsupported.")
@click.pass_context
def bib(
    ctx: click.Context,
    bib_file: str,
    fields: tuple[str, ...],
    output: str | None,
    in_place: bool,
    check: bool,
) -> None:
    """Normalize the date fields of a BibTeX file.

    BIB_FILE is only modified with --in-place.
    """
    if in_place and output:
        raise click.UsageError("--output and --in-place are mutually exclusive")
    config: Config = ctx.obj
    if in_place:
        output = bib_file

    fixes = normalize_file(bib_file, fields or config.date_fields, output=output)
    _report(fixes)
    if check and any(f.changed or f.failed for f in fixes):
        ctx.exit(1)


if __name__ == "__main__":
    main()
