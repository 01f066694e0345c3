"""Entry point for loggrep CLI."""

import sys
from collections.abc import Iterator
from typing import TextIO

import rich_click as click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from loggrep.core.processor import Outcome
from loggrep.core.registry import DEFAULT_REGISTRY
from loggrep.core.session import Session
from loggrep.errors import FormatNotFoundError, InputError, LoggrepError, NoFormatMatchError
from loggrep.models.config import RunConfig
from loggrep.models.report import FormatReport

click.rich_click.TEXT_MARKUP = "rich"
click.rich_click.SHOW_ARGUMENTS = True


def _read_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines from a text stream without their line terminators.

    Raises:
        InputError: If the stream is not valid UTF-8.
    """
    try:
        for line in stream:
            yield line.rstrip("\r\n")
    except UnicodeDecodeError as e:
        raise InputError(f"Input is not valid UTF-8 ({e.reason})") from e


def _report_error(err_console: Console, error: LoggrepError) -> None:
    """Print a fatal error with hints to stderr.

    Args:
        err_console: Rich console writing to stderr.
        error: The error that ended the run.
    """
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")

    if isinstance(error, FormatNotFoundError):
        err_console.print("\nAvailable formats:")
        for name in error.available:
            err_console.print(f"  - {name}")
    elif isinstance(error, NoFormatMatchError):
        err_console.print("\nUse --format to specify a format manually.")
        err_console.print("Use --list-formats to see the supported formats.")


def _print_formats(console: Console) -> None:
    """Print a table of the built-in formats."""
    table = Table(title="Available Formats")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Fields", style="green")
    table.add_column("Description")

    for name, template in DEFAULT_REGISTRY.items():
        table.add_row(name, ", ".join(template.field_names), escape(template.description))

    console.print(table)


def _print_report(console: Console, err_console: Console, report: FormatReport) -> None:
    """Print a describe-mode report.

    Args:
        console: Rich console for the report.
        err_console: Rich console for warnings.
        report: The report to print.
    """
    console.print(f"\n[bold cyan]Format: {report.format_name}[/bold cyan]")
    if report.description:
        console.print(f"Description: {escape(report.description)}")

    console.print(f"\n[bold]Fields:[/bold] {', '.join(report.field_names)}")

    if report.sample is None:
        console.print("\n[dim]No sample line in the input.[/dim]")
        return

    if not report.sample_matched:
        err_console.print(
            f"[yellow]Warning:[/yellow] The sample line is not in the "
            f"{report.format_name} format."
        )
        return

    table = Table(title="Sample Line", show_header=True, header_style="bold")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")
    for name, value in report.values.items():
        table.add_row(name, escape(value))

    console.print()
    console.print(table)

    if report.also_matches:
        console.print(f"\n[dim]Also matches:[/dim] {', '.join(report.also_matches)}")

    if report.example:
        console.print("\n[bold]Example:[/bold]")
        # Values are arbitrary log text; print the command as-is.
        console.print(f"  {report.example}", markup=False, highlight=False, soft_wrap=True)

    console.print()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("field", required=False)
@click.argument("pattern", required=False)
@click.option("--version", is_flag=True, help="Show version and exit.")
@click.option(
    "--list-formats",
    is_flag=True,
    help="List all supported log formats and exit."
)
@click.option(
    "-F",
    "--format",
    "format_name",
    type=str,
    envvar="LOGGREP_FORMAT",
    help="Log format of the input (default: autodetect from the first line)."
)
@click.option(
    "-i",
    "--ignore-case",
    is_flag=True,
    help="Match the pattern without regard to case."
)
@click.option(
    "-v",
    "--invert-match",
    "invert",
    is_flag=True,
    help="Select lines whose field does NOT match the pattern."
)
@click.option(
    "-f",
    "--fixed-strings",
    is_flag=True,
    help="Compare the field to PATTERN as a literal string instead of a regex."
)
@click.pass_context
def cli(
    ctx: click.Context,
    field: str | None,
    pattern: str | None,
    version: bool,
    list_formats: bool,
    format_name: str | None,
    ignore_case: bool,
    invert: bool,
    fixed_strings: bool,
) -> None:
    """loggrep - Filter structured log lines by the value of a field.

    Reads log lines from stdin and prints those whose FIELD matches PATTERN.
    Without FIELD and PATTERN, describes the format of the first line.
    """
    console = Console()
    err_console = Console(stderr=True)

    if version:
        from loggrep import __version__
        click.echo(f"loggrep {__version__}")
        return

    if list_formats:
        _print_formats(console)
        return

    try:
        config = RunConfig.from_args(
            format_name=format_name,
            field=field,
            pattern=pattern,
            ignore_case=ignore_case,
            invert=invert,
            fixed_strings=fixed_strings,
        )
        session = Session(config)

        if config.mode == "describe":
            report = session.describe(_read_lines(sys.stdin))
            _print_report(console, err_console, report)
            return

        for result in session.filter(_read_lines(sys.stdin)):
            if result.outcome is Outcome.EMIT:
                # Raw print keeps the line byte-for-byte for pipes.
                print(result.line)
            elif result.outcome is Outcome.MALFORMED:
                err_console.print(
                    f"[yellow]Warning:[/yellow] Line {result.line_number} could not be "
                    f"decoded into the {session.template.name} format"
                )
    except LoggrepError as e:
        _report_error(err_console, e)
        ctx.exit(1)


if __name__ == "__main__":
    cli()
