"""Infrastructure layer: reading INI sources from files and streams.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Opened files are closed by whoever opened them, on every exit path.
"""

from tinyflags.infra.ini_reader import IniReader
from tinyflags.infra.line_scanner import LineScanner

__all__: list[str] = [
    "IniReader",
    "LineScanner",
]
