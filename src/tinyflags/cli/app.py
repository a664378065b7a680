"""CLI application entry point for the ``tinyflags`` command.

The command inspects an INI file the way :class:`~tinyflags.FlagSet`
would read it and prints every ``key = value`` entry as a Rich table,
with continuation lines already joined.  Its own flags are parsed with
tinyflags itself.

This module is the **sole error boundary** of the command.  It catches
:class:`~tinyflags.exceptions.TinyflagsError`, ``KeyboardInterrupt``
and any unexpected ``Exception``, rendering user-friendly messages and
returning well-defined exit codes.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass

from rich.markup import escape
from rich.table import Table

from tinyflags.cli import exit_codes
from tinyflags.cli.console import configure_logging, get_console
from tinyflags.cli.usage import render_usage, report_and_exit
from tinyflags.core.destinations import AttributeDestination
from tinyflags.exceptions import TinyflagsError
from tinyflags.flagset import FlagSet
from tinyflags.infra.ini_reader import IniReader
from tinyflags.version import __version__

PROG: str = "tinyflags"


# ---------------------------------------------------------------------------
# Flags
# ---------------------------------------------------------------------------

@dataclass
class Options:
    """Parsed command-line options."""

    file: str = ""
    verbose: bool = False
    version: bool = False


def build_flagset(options: Options) -> FlagSet:
    """Declare the command's flags, bound to the fields of *options*."""
    flagset = FlagSet()
    flagset.string_var(
        AttributeDestination(options, "file"), "file", "f", "", "INI file to inspect",
    )
    flagset.bool_var(
        AttributeDestination(options, "verbose"), "verbose", "v", "Log how the file is read",
    )
    flagset.bool_var(
        AttributeDestination(options, "version"), "version", "V", "Print the version and exit",
    )
    return flagset


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

def _handle_inspect(path: str) -> int:
    """Print the entries of the INI file at *path*."""
    try:
        reader = IniReader.open(path)
    except OSError as exc:
        raise TinyflagsError(
            f"Cannot open {path}: {exc.strerror or exc}",
            hint="Check the path passed to --file.",
        ) from exc

    with reader:
        pairs = list(reader.pairs())

    console = get_console()
    if not pairs:
        console.print(f"[yellow]No entries in {escape(path)}.[/yellow]")
        return exit_codes.SUCCESS

    table = Table(
        title=escape(path),
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Line", justify="right")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for pair in pairs:
        value = escape(pair.value) if pair.value is not None else "[red](missing)[/red]"
        table.add_row(str(pair.lineno), escape(pair.key), value)

    console.print(table)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the tinyflags CLI.

    Parameters
    ----------
    argv:
        Explicit argument list without the program name.  When ``None``
        (default), ``sys.argv[1:]`` is used.

    Returns
    -------
    int
        OS process exit code.  Flag errors and ``--help`` exit directly
        through :func:`~tinyflags.cli.usage.report_and_exit`.
    """
    args = sys.argv[1:] if argv is None else argv
    options = Options()
    flagset = build_flagset(options)

    if not flagset.parse([PROG, *args]):
        report_and_exit(flagset)

    configure_logging(options.verbose)

    if options.version:
        get_console().print(f"{PROG} {__version__}")
        return exit_codes.SUCCESS

    if not options.file:
        render_usage(flagset)
        return exit_codes.SUCCESS

    return _handle_inspect(options.file)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    console = get_console()
    try:
        code = main()
        sys.exit(code)
    except TinyflagsError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
