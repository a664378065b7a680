"""Usage text and the report-and-exit step for a parsed :class:`FlagSet`.

Output is plain text written to a stream (stderr by default) so that
column alignment is exact regardless of terminal width.

Layout::

    FLAGS
      -c, --config     Read flags from an INI file
          --port       Port to listen on (default: 8080)
      -h, --help       Show this help message

Names are padded to the longest registered name plus five columns.
"""

from __future__ import annotations

import sys
from typing import TextIO

from tinyflags.cli import exit_codes
from tinyflags.core.coercion import format_time
from tinyflags.core.models import ErrorKind, FlagKind, FlagSpec
from tinyflags.flagset import FlagSet

_NAME_MARGIN: int = 5


def _short_column(short_name: str | None) -> str:
    if short_name:
        return f"  -{short_name}, "
    return " " * 6


def _default_suffix(spec: FlagSpec) -> str:
    """Render ``" (default: …)"`` for non-empty, non-zero defaults."""
    default = spec.default
    if spec.kind is FlagKind.BOOL or not default:
        return ""
    if spec.kind is FlagKind.STRING or spec.kind is FlagKind.INT:
        text = str(default)
    elif spec.kind is FlagKind.TIME:
        text = format_time(int(default))
    else:
        text = f"{default:f}"
    return f" (default: {text})"


def format_usage(flagset: FlagSet) -> str:
    """Return the usage block for *flagset*, trailing blank line included."""
    width = flagset.registry.max_name_width() + _NAME_MARGIN
    lines = ["FLAGS"]

    config = flagset.config
    if config is not None:
        lines.append(
            f"{_short_column(config.short_name)}--{config.name:<{width}} {config.description}"
        )

    for spec in flagset.flags:
        lines.append(
            f"{_short_column(spec.short_name)}--{spec.name:<{width}} "
            f"{spec.description}{_default_suffix(spec)}"
        )

    lines.append(f"{_short_column('h')}--{'help':<{width}} Show this help message")
    return "\n".join(lines) + "\n\n"


def render_usage(flagset: FlagSet, stream: TextIO | None = None) -> None:
    """Write the usage block to *stream* (stderr by default)."""
    out = stream if stream is not None else sys.stderr
    out.write(format_usage(flagset))


def format_error(flagset: FlagSet) -> str:
    """Return the ``ERROR:`` line for the stored failure, or ``""``."""
    error = flagset.error
    if error.kind in (ErrorKind.NONE, ErrorKind.HELP):
        return ""
    return f"ERROR: {error.kind.value} \"{error.name}\"\n"


def report_and_exit(flagset: FlagSet, stream: TextIO | None = None) -> None:
    """Report the stored parse outcome and exit the process.

    * No error: returns without output.
    * Help requested: usage, exit :data:`exit_codes.SUCCESS`.
    * Any other error: the ``ERROR:`` line, a blank line, usage, exit
      :data:`exit_codes.GENERAL_ERROR`.
    """
    kind = flagset.error.kind
    if kind is ErrorKind.NONE:
        return

    out = stream if stream is not None else sys.stderr
    if kind is ErrorKind.HELP:
        render_usage(flagset, out)
        sys.exit(exit_codes.SUCCESS)

    out.write(format_error(flagset) + "\n")
    render_usage(flagset, out)
    sys.exit(exit_codes.GENERAL_ERROR)
