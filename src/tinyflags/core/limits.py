"""Capacity limits and formats used across the library.

Centralised here so that every bound is a well-known, tested value
rather than a magic integer scattered across the codebase.  A
:class:`Limits` instance bundles them; pass a customised one to
:class:`~tinyflags.flagset.FlagSet` to override them per flag set.
"""

from __future__ import annotations

from dataclasses import dataclass

MAX_FLAGS: int = 256
"""Maximum number of flags a single flag set accepts."""

MAX_NAME_LENGTH: int = 64
"""Maximum length of a flag name and of a reported error name."""

LINE_CAPACITY: int = 512
"""Physical INI lines longer than this are truncated, not rejected."""

KEY_CAPACITY: int = 64
"""Longest INI key accepted; longer keys are an overflow error."""

VALUE_CAPACITY: int = 512
"""Longest value kept (string flags and joined INI values)."""

TIME_FORMAT: str = "%Y-%m-%dT%H:%M:%S"
"""Format of TIME flag values, e.g. ``2025-01-31T23:59:00`` (UTC)."""

MAX_INCLUDE_DEPTH: int = 32
"""Nesting bound for config files that name further config files."""


@dataclass(frozen=True, slots=True)
class Limits:
    """Per-flag-set overrides of the module-level limits."""

    max_flags: int = MAX_FLAGS
    max_name_length: int = MAX_NAME_LENGTH
    line_capacity: int = LINE_CAPACITY
    key_capacity: int = KEY_CAPACITY
    value_capacity: int = VALUE_CAPACITY
    max_include_depth: int = MAX_INCLUDE_DEPTH


DEFAULT_LIMITS = Limits()
