"""Custom exception hierarchy for tinyflags.

All exceptions raised by the library inherit from
:class:`TinyflagsError`.  Parse-time failures carry an
:class:`~tinyflags.core.models.ErrorRecord` so that
:meth:`~tinyflags.flagset.FlagSet.parse` can store the first one and
report it later without re-deriving the kind or the offending name.

Hierarchy
---------
TinyflagsError
├── FlagParseError
│   ├── HelpRequested
│   ├── UnknownFlagError
│   ├── MissingValueError
│   ├── InvalidValueError
│   └── OpenConfigError
├── RegistryError
│   ├── RegistryFullError
│   └── NameTooLongError
├── IniError
│   ├── IniSyntaxError
│   └── IniOverflowError
└── CoercionError
"""

from __future__ import annotations

from tinyflags.core.models import ErrorKind, ErrorRecord


class TinyflagsError(Exception):
    """Base exception for all tinyflags errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Parse failures --------------------------------------------------------

class FlagParseError(TinyflagsError):
    """A parse stopped on a token or config key.

    Subclasses fix :attr:`kind`; *name* is the offending flag name,
    literal token, or config key.
    """

    kind: ErrorKind = ErrorKind.NONE

    def __init__(self, name: str, *, hint: str | None = None) -> None:
        super().__init__(f"{self.kind.value} \"{name}\"", hint=hint)
        self.name: str = name

    def record(self, max_name_length: int) -> ErrorRecord:
        """Return the error record for this failure, name truncated."""
        return ErrorRecord(kind=self.kind, name=self.name[:max_name_length])


class HelpRequested(FlagParseError):
    """Raised when ``--help`` or ``-h`` is seen.  Not a true error."""

    kind = ErrorKind.HELP


class UnknownFlagError(FlagParseError):
    """Raised for a token or config key that matches no flag."""

    kind = ErrorKind.UNKNOWN_FLAG


class MissingValueError(FlagParseError):
    """Raised when a value-taking flag or key has nothing after it."""

    kind = ErrorKind.MISSING_VALUE


class InvalidValueError(FlagParseError):
    """Raised when a value cannot be coerced to the flag's kind."""

    kind = ErrorKind.INVALID_VALUE


class OpenConfigError(FlagParseError):
    """Raised when a config file cannot be opened (or nests too deep)."""

    kind = ErrorKind.OPEN_CONFIG_FAILED


# --- Registration ----------------------------------------------------------

class RegistryError(TinyflagsError):
    """Raised when a flag cannot be registered."""


class RegistryFullError(RegistryError):
    """Raised when the flag set already holds its maximum number of flags."""


class NameTooLongError(RegistryError):
    """Raised when a flag name exceeds the configured name length."""


# --- INI scanning ----------------------------------------------------------

class IniError(TinyflagsError):
    """Base class for INI scanning errors; carries the 1-based line number."""

    def __init__(self, message: str, lineno: int, *, hint: str | None = None) -> None:
        super().__init__(f"line {lineno}: {message}", hint=hint)
        self.lineno: int = lineno


class IniSyntaxError(IniError):
    """Raised for a content line without ``=`` at index 2 or later."""


class IniOverflowError(IniError):
    """Raised when a key is longer than the key capacity."""

    def __init__(self, key: str, lineno: int) -> None:
        super().__init__(f"key too long: {key!r}", lineno)
        self.key: str = key
        """The key, truncated to capacity."""


# --- Coercion --------------------------------------------------------------

class CoercionError(TinyflagsError):
    """Raised when text cannot be converted to a flag kind."""
