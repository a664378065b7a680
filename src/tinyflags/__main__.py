"""Allow ``python -m tinyflags`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m tinyflags`` behaves identically to the ``tinyflags``
console script.
"""

from __future__ import annotations

from tinyflags.cli.app import cli

if __name__ == "__main__":
    cli()
