"""Domain models for tinyflags.

Flag specifications and error records are **frozen** dataclasses:
immutable value objects with no behaviour beyond data access.  The
destination a spec writes to is a separate, mutable handle owned by
the caller (see :mod:`tinyflags.core.destinations`).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tinyflags.core.destinations import Destination


# ---------------------------------------------------------------------------
# Kinds
# ---------------------------------------------------------------------------

class FlagKind(enum.Enum):
    """The six scalar kinds a flag can hold."""

    BOOL = "bool"
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    DOUBLE = "double"
    TIME = "time"


class ErrorKind(enum.Enum):
    """Classification of a parse failure.

    Values are the wording used in ``ERROR:`` report lines.
    """

    NONE = "no error"
    HELP = "help requested"
    UNKNOWN_FLAG = "unknown flag"
    MISSING_VALUE = "missing value for flag"
    INVALID_VALUE = "invalid value for flag"
    OPEN_CONFIG_FAILED = "failed to open config file"


# ---------------------------------------------------------------------------
# Flag specification
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlagSpec:
    """A single declared flag."""

    kind: FlagKind
    """Scalar kind of the flag."""

    name: str
    """Long name, used as ``--name`` and as the config key."""

    short_name: str | None
    """One-character alias used as ``-x``, or ``None``."""

    description: str
    """Help text shown in usage output."""

    default: Any
    """Value written to the destination at registration."""

    destination: Destination
    """Caller-owned storage the parser writes to."""


@dataclass(frozen=True, slots=True)
class ConfigFlag:
    """Descriptor of the file-valued flag that triggers INI merging."""

    name: str
    short_name: str | None
    description: str


# ---------------------------------------------------------------------------
# Error record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ErrorRecord:
    """Kind and offending name of the first failure of a parse."""

    kind: ErrorKind = ErrorKind.NONE
    name: str = ""

    def __bool__(self) -> bool:
        return self.kind is not ErrorKind.NONE


NO_ERROR = ErrorRecord()


# ---------------------------------------------------------------------------
# INI key/value pair
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class KeyValue:
    """One logical ``key = value`` entry read from an INI source.

    ``value`` is ``None`` when nothing follows the ``=``.
    """

    key: str
    value: str | None
    lineno: int
    """Line number of the key (continuation lines follow it)."""
