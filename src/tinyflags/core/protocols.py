"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations.  Any key/value source can drive the config merger.
"""

from __future__ import annotations

from types import TracebackType
from typing import Protocol


class KeyValueSource(Protocol):
    """A line-oriented ``key = value`` reader.

    Calls alternate: :meth:`read_key`, then (optionally) :meth:`read_value`
    for that key.  Skipping :meth:`read_value` is allowed; the next
    :meth:`read_key` then discards the pending value.
    """

    name: str
    """Human-readable origin (file path or ``"<stream>"``)."""

    lineno: int
    """Number of the physical line read last."""

    def read_key(self, capacity: int) -> str | None:
        """Return the next key, or ``None`` at end of input.

        Raises
        ------
        IniSyntaxError
            For a content line that is not ``key = value``.
        IniOverflowError
            When the key is longer than *capacity*.
        """
        ...  # pragma: no cover

    def read_value(self, capacity: int) -> str | None:
        """Return the value of the key just read, or ``None`` if empty."""
        ...  # pragma: no cover

    def __enter__(self) -> KeyValueSource:
        ...  # pragma: no cover

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        ...  # pragma: no cover


class ConfigOpener(Protocol):
    """Open a named config file as a :class:`KeyValueSource`.

    Implementations raise :class:`OSError` when the file cannot be
    opened; the returned source owns (and closes) its stream.
    """

    def __call__(self, path: str, *, line_capacity: int) -> KeyValueSource:
        ...  # pragma: no cover
