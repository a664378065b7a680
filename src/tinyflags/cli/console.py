"""Shared Rich console and logging setup for the CLI layer.

All CLI output goes to stderr so that stdout stays free for whatever
the calling tool prints.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from rich.console import Console
from rich.logging import RichHandler


@lru_cache(maxsize=1)
def get_console() -> Console:
    """Return the process-wide Rich console targeting stderr."""
    return Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Route ``tinyflags`` log records to the console.

    Only DEBUG output is interesting here, so nothing is installed
    unless *verbose* is set.
    """
    if not verbose:
        return
    package_logger = logging.getLogger("tinyflags")
    if any(isinstance(h, RichHandler) for h in package_logger.handlers):
        return
    handler = RichHandler(console=get_console(), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
