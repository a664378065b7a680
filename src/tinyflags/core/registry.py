"""Ordered flag registry and the token/key lookup rules.

Lookups are linear and first-match-wins in declaration order.  A long
token matches by *prefix*: ``--verb`` selects ``verbose``.  When two
names share the prefix the first-registered flag wins; this is not an
error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from tinyflags.core.destinations import Destination
from tinyflags.core.limits import DEFAULT_LIMITS, Limits
from tinyflags.core.models import ConfigFlag, FlagKind, FlagSpec
from tinyflags.core.coercion import coerce
from tinyflags.exceptions import CoercionError, InvalidValueError, NameTooLongError, RegistryFullError

logger = logging.getLogger(__name__)


def _split_token(token: str) -> tuple[str | None, str | None]:
    """Return ``(long_text, short_char)`` for a flag-shaped token.

    ``--name`` yields ``("name", None)``, ``-x`` yields ``(None, "x")``
    and anything else ``(None, None)``.
    """
    if len(token) < 2 or token[0] != "-":
        return None, None
    if token[1] == "-":
        return token[2:], None
    if len(token) == 2:
        return None, token[1]
    return None, None


def is_help_token(token: str) -> bool:
    """True for exactly ``--help`` or ``-h``."""
    return token in ("--help", "-h")


class Registry:
    """Flags in declaration order plus the optional config flag.

    Uniqueness of names and short names is the caller's responsibility
    and is not checked.
    """

    def __init__(self, limits: Limits = DEFAULT_LIMITS) -> None:
        self.limits: Limits = limits
        self.ignore_unknown: bool = False
        self.config: ConfigFlag | None = None
        self._specs: list[FlagSpec] = []

    def __iter__(self) -> Iterator[FlagSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        kind: FlagKind,
        destination: Destination,
        name: str,
        short_name: str | None,
        default: Any,
        description: str,
    ) -> FlagSpec:
        """Append a flag and write *default* into *destination*.

        Raises
        ------
        RegistryFullError
            When ``limits.max_flags`` flags are already registered.
        NameTooLongError
            When *name* is longer than ``limits.max_name_length``.
        """
        if len(self._specs) >= self.limits.max_flags:
            raise RegistryFullError(
                f"cannot register {name!r}: flag set is full",
                hint=f"At most {self.limits.max_flags} flags are supported.",
            )
        self._check_name(name)
        spec = FlagSpec(
            kind=kind,
            name=name,
            short_name=short_name or None,
            description=description,
            default=default,
            destination=destination,
        )
        self._specs.append(spec)
        destination.set(default)
        logger.debug("registered %s flag %r", kind.value, name)
        return spec

    def set_config_flag(self, name: str, short_name: str | None, description: str) -> ConfigFlag:
        """Enable the file-valued flag that triggers INI merging."""
        self._check_name(name)
        self.config = ConfigFlag(name=name, short_name=short_name or None, description=description)
        return self.config

    def _check_name(self, name: str) -> None:
        if len(name) > self.limits.max_name_length:
            raise NameTooLongError(
                f"flag name {name[:16]!r}... is {len(name)} characters long",
                hint=f"Names are limited to {self.limits.max_name_length} characters.",
            )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup_by_token(self, token: str) -> FlagSpec | None:
        """Match a command-line token against long and short names."""
        long_text, short_char = _split_token(token)
        if long_text:
            for spec in self._specs:
                if spec.name.startswith(long_text):
                    return spec
        elif short_char is not None:
            for spec in self._specs:
                if spec.short_name == short_char:
                    return spec
        return None

    def lookup_by_bare_key(self, key: str) -> FlagSpec | None:
        """Match a config key against the full declared names."""
        for spec in self._specs:
            if spec.name == key:
                return spec
        return None

    def is_config_token(self, token: str) -> bool:
        """True when *token* spells the config flag (long prefix or short)."""
        if self.config is None:
            return False
        long_text, short_char = _split_token(token)
        if long_text:
            return self.config.name.startswith(long_text)
        if short_char is not None:
            return self.config.short_name == short_char
        return False

    def is_config_key(self, key: str) -> bool:
        return self.config is not None and self.config.name == key

    # ------------------------------------------------------------------
    # Assignment
    # ------------------------------------------------------------------

    def assign(self, spec: FlagSpec, text: str) -> None:
        """Coerce *text* for *spec* and write it to the destination.

        Nothing is written when coercion fails.

        Raises
        ------
        InvalidValueError
            Naming the flag, when *text* is not valid for its kind.
        """
        try:
            value = coerce(spec.kind, text, capacity=self.limits.value_capacity)
        except CoercionError as exc:
            raise InvalidValueError(spec.name, hint=str(exc)) from exc
        spec.destination.set(value)

    def max_name_width(self) -> int:
        """Longest flag name, config flag included (for usage layout)."""
        widths = [len(spec.name) for spec in self._specs]
        if self.config is not None:
            widths.append(len(self.config.name))
        return max(widths, default=0)
