"""CLI layer: usage rendering, error reporting and the ``tinyflags`` command.

This package is the outermost layer of the library.  It may import
from ``core``, ``infra`` and the :mod:`tinyflags.flagset` facade, but no
other layer may import from ``cli``.
"""

from tinyflags.cli.usage import format_usage, render_usage, report_and_exit

__all__: list[str] = [
    "format_usage",
    "render_usage",
    "report_and_exit",
]
