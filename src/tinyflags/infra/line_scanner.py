"""Infrastructure: buffered physical-line reader for INI sources.

Reads one line at a time, truncates it to a fixed capacity (a
documented limit, not an error), trims trailing whitespace and keeps a
cursor so callers can re-scan the rest of a line after a prefix has
been consumed.

Rules
-----
* Streams opened by :meth:`LineScanner.open` are owned and closed by
  :meth:`LineScanner.close`, exactly once.
* Caller-supplied streams are never closed.
* Files opened by path are decoded as UTF-8; bytes that are not valid
  UTF-8 are kept as lone surrogates (``surrogateescape``) and never fail
  a read.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import TextIO

from tinyflags.core.limits import LINE_CAPACITY

logger = logging.getLogger(__name__)


class LineScanner:
    """Line-at-a-time reader over a text stream.

    Parameters
    ----------
    stream:
        Readable text stream.
    owned:
        Whether :meth:`close` closes *stream*.
    capacity:
        Maximum number of characters kept from each physical line.
    name:
        Origin shown in diagnostics; defaults to the stream's name.
    """

    def __init__(
        self,
        stream: TextIO,
        *,
        owned: bool = False,
        capacity: int = LINE_CAPACITY,
        name: str | None = None,
    ) -> None:
        self._stream: TextIO = stream
        self._owned: bool = owned
        self.capacity: int = capacity
        self.name: str = name or str(getattr(stream, "name", "<stream>"))
        self.line: str = ""
        self.lineno: int = 0
        self.cursor: int = 0
        self.closed: bool = False

    @classmethod
    def open(cls, path: str, *, capacity: int = LINE_CAPACITY) -> LineScanner:
        """Open *path* for reading; the scanner owns the stream.

        Raises
        ------
        OSError
            When the file cannot be opened.
        """
        stream = open(path, encoding="utf-8", errors="surrogateescape")  # noqa: SIM115
        logger.debug("opened %s", path)
        return cls(stream, owned=True, capacity=capacity, name=path)

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def consume(self) -> bool:
        """Load the next physical line; ``False`` at end of input."""
        self.cursor = 0
        raw = self._stream.readline()
        if not raw:
            self.line = ""
            return False

        self.lineno += 1
        line = raw.rstrip()
        if len(line) > self.capacity:
            logger.debug("%s:%d: line truncated to %d characters", self.name, self.lineno, self.capacity)
            line = line[: self.capacity].rstrip()
        self.line = line
        return True

    @property
    def remaining(self) -> int:
        """Number of unconsumed characters on the current line."""
        return len(self.line) - self.cursor

    def rest(self) -> str:
        """Skip leading whitespace and return the unconsumed remainder."""
        line = self.line
        while self.cursor < len(line) and line[self.cursor].isspace():
            self.cursor += 1
        return line[self.cursor :]

    def advance(self, count: int) -> None:
        """Mark *count* more characters of the current line as consumed."""
        self.cursor = min(self.cursor + count, len(self.line))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the stream; only owned streams are actually closed."""
        if self.closed:
            return
        self.closed = True
        if self._owned:
            self._stream.close()

    def __enter__(self) -> LineScanner:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
