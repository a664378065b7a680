"""Shared pytest fixtures and configuration for the tinyflags test suite.

Guidelines
----------
* Config files are written under ``tmp_path``, never the working tree.
* Tests must not depend on the local timezone or locale.
* The process-wide default flag set is reset around every test.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from tinyflags import FlagSet, reset_default_flagset


@pytest.fixture(autouse=True)
def _fresh_default_flagset() -> Iterator[None]:
    reset_default_flagset()
    yield
    reset_default_flagset()


@pytest.fixture
def write_ini(tmp_path: Path) -> Callable[..., str]:
    """Write an INI file and return its path as ``str``."""

    def _write(text: str, name: str = "config.ini") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def flagset() -> FlagSet:
    return FlagSet()
