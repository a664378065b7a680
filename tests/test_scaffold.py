"""Smoke tests: verify package wiring.

These tests prove that:
* The public API is importable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

import tinyflags
from tinyflags import __version__
from tinyflags.cli import exit_codes
from tinyflags.core.models import ErrorKind
from tinyflags.exceptions import (
    CoercionError,
    FlagParseError,
    HelpRequested,
    IniError,
    IniOverflowError,
    IniSyntaxError,
    InvalidValueError,
    MissingValueError,
    NameTooLongError,
    OpenConfigError,
    RegistryError,
    RegistryFullError,
    TinyflagsError,
    UnknownFlagError,
)


# ---------------------------------------------------------------------------
# Version / public API
# ---------------------------------------------------------------------------

class TestPackage:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)

    def test_public_names_exported(self) -> None:
        for name in tinyflags.__all__:
            assert hasattr(tinyflags, name)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            FlagParseError,
            RegistryError,
            IniError,
            CoercionError,
        ],
    )
    def test_families_inherit_from_base(self, exc_class: type[TinyflagsError]) -> None:
        assert issubclass(exc_class, TinyflagsError)

    @pytest.mark.parametrize(
        ("exc_class", "kind"),
        [
            (HelpRequested, ErrorKind.HELP),
            (UnknownFlagError, ErrorKind.UNKNOWN_FLAG),
            (MissingValueError, ErrorKind.MISSING_VALUE),
            (InvalidValueError, ErrorKind.INVALID_VALUE),
            (OpenConfigError, ErrorKind.OPEN_CONFIG_FAILED),
        ],
    )
    def test_parse_errors_carry_kind(
        self, exc_class: type[FlagParseError], kind: ErrorKind
    ) -> None:
        assert issubclass(exc_class, FlagParseError)
        err = exc_class("port")
        assert err.kind is kind
        assert err.name == "port"

    def test_registry_errors(self) -> None:
        assert issubclass(RegistryFullError, RegistryError)
        assert issubclass(NameTooLongError, RegistryError)

    def test_ini_errors(self) -> None:
        assert issubclass(IniSyntaxError, IniError)
        assert issubclass(IniOverflowError, IniError)

    def test_hint_is_stored(self) -> None:
        err = TinyflagsError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert TinyflagsError("boom").hint is None

    def test_parse_error_message(self) -> None:
        assert str(UnknownFlagError("--bogus")) == 'unknown flag "--bogus"'

    def test_record_truncates_name(self) -> None:
        record = InvalidValueError("x" * 100).record(64)
        assert record.kind is ErrorKind.INVALID_VALUE
        assert record.name == "x" * 64

    def test_ini_error_mentions_line(self) -> None:
        err = IniSyntaxError("bad", 7)
        assert err.lineno == 7
        assert str(err) == "line 7: bad"


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2
