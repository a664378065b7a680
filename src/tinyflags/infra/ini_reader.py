"""INI-style ``key = value`` reader built on :class:`LineScanner`.

Satisfies :class:`~tinyflags.core.protocols.KeyValueSource` structurally.

Format
------
* Blank lines and lines starting with ``;`` or ``#`` are skipped.
* The first ``=`` splits key from value; it must be at index 2 or later
  of the line.
* No sections, no quoting, no escapes.
* A value ending in ``\\`` continues on the next line; fragments are
  joined with a single space.
"""

from __future__ import annotations

from collections.abc import Iterator
from types import TracebackType
from typing import TextIO

from tinyflags.core.limits import KEY_CAPACITY, LINE_CAPACITY, VALUE_CAPACITY
from tinyflags.core.models import KeyValue
from tinyflags.exceptions import IniOverflowError, IniSyntaxError
from tinyflags.infra.line_scanner import LineScanner

_COMMENT_MARKERS: tuple[str, ...] = (";", "#")
_CONTINUATION: str = "\\"


class IniReader:
    """Read keys and values from an INI source.

    Usage::

        with IniReader.open("app.ini") as reader:
            for pair in reader.pairs():
                print(pair.key, pair.value)
    """

    def __init__(self, scanner: LineScanner) -> None:
        self._scanner: LineScanner = scanner
        self._pending_value: bool = False

    @classmethod
    def open(cls, path: str, *, line_capacity: int = LINE_CAPACITY) -> IniReader:
        """Open *path*; the reader owns and closes the file.

        Raises
        ------
        OSError
            When the file cannot be opened.
        """
        return cls(LineScanner.open(path, capacity=line_capacity))

    @classmethod
    def from_stream(
        cls,
        stream: TextIO,
        *,
        line_capacity: int = LINE_CAPACITY,
        name: str | None = None,
    ) -> IniReader:
        """Read a caller-supplied stream; it is never closed by the reader."""
        return cls(LineScanner(stream, owned=False, capacity=line_capacity, name=name))

    @property
    def name(self) -> str:
        return self._scanner.name

    @property
    def lineno(self) -> int:
        return self._scanner.lineno

    # ------------------------------------------------------------------
    # Keys and values
    # ------------------------------------------------------------------

    def read_key(self, capacity: int = KEY_CAPACITY) -> str | None:
        """Return the next key, or ``None`` at end of input.

        A value left unread from the previous key is skipped first,
        continuation lines included.

        Raises
        ------
        IniSyntaxError
            When a content line has no ``=`` at index 2 or later.
        IniOverflowError
            When the key is longer than *capacity*.  The value of that
            line is still skipped by the next call.
        """
        if self._pending_value:
            self.read_value(VALUE_CAPACITY)

        scanner = self._scanner
        while scanner.consume():
            line = scanner.rest()
            if not line or line.startswith(_COMMENT_MARKERS):
                continue

            separator = line.find("=")
            if separator < 2:
                raise IniSyntaxError(
                    f"expected 'key = value', got {line!r}",
                    scanner.lineno,
                    hint="Keys must be at least two characters before '='.",
                )

            scanner.advance(separator + 1)
            self._pending_value = True

            key = line[:separator].rstrip()
            if len(key) > capacity:
                raise IniOverflowError(key[:capacity], scanner.lineno)
            return key

        return None

    def read_value(self, capacity: int = VALUE_CAPACITY) -> str | None:
        """Return the value of the key just read, capped to *capacity*.

        Returns ``None`` when nothing follows the ``=``.  Continuation
        lines are joined until a fragment lacks the trailing marker or a
        blank line or end of input is reached.  Fragments past
        *capacity* are still consumed, but dropped.
        """
        self._pending_value = False
        scanner = self._scanner

        text = scanner.rest()
        if not text:
            return None
        if not text.endswith(_CONTINUATION):
            return text[:capacity]

        fragments: list[str] = []
        size = 0
        while True:
            more = text.endswith(_CONTINUATION)
            if more:
                text = text[:-1].rstrip()
            if text and size < capacity:
                fragments.append(text)
                size += len(text) + 1
            if not more or not scanner.consume():
                break
            text = scanner.rest()
            if not text:
                break

        return " ".join(fragments)[:capacity]

    def pairs(
        self,
        key_capacity: int = KEY_CAPACITY,
        value_capacity: int = VALUE_CAPACITY,
    ) -> Iterator[KeyValue]:
        """Yield every remaining ``key = value`` entry."""
        while True:
            key = self.read_key(key_capacity)
            if key is None:
                return
            lineno = self.lineno
            yield KeyValue(key=key, value=self.read_value(value_capacity), lineno=lineno)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        self._scanner.close()

    def __enter__(self) -> IniReader:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
