"""Merge INI key/value sources into a flag registry.

The merger drives a :class:`~tinyflags.core.protocols.KeyValueSource`,
maps each key to a registered flag and assigns the coerced value.  A
key equal to the config flag's name names another file, which is merged
in full before the outer source continues (file chaining).

Guarantees
----------
* The first failure stops the merge; earlier writes are not rolled back.
* Only :class:`~tinyflags.exceptions.FlagParseError` subclasses escape.
* Sources opened here are closed on every exit path; caller-supplied
  sources are never closed.
"""

from __future__ import annotations

import logging

from tinyflags.core.protocols import ConfigOpener, KeyValueSource
from tinyflags.core.registry import Registry
from tinyflags.exceptions import (
    IniOverflowError,
    IniSyntaxError,
    InvalidValueError,
    MissingValueError,
    OpenConfigError,
    UnknownFlagError,
)

logger = logging.getLogger(__name__)


class ConfigMerger:
    """Apply config files to the flags of *registry*.

    Parameters
    ----------
    registry:
        Flags to assign, plus the ignore-unknown mode and config flag.
    opener:
        Any callable satisfying :class:`ConfigOpener`.
    """

    def __init__(self, registry: Registry, opener: ConfigOpener) -> None:
        self._registry: Registry = registry
        self._opener: ConfigOpener = opener

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def merge_file(self, path: str, *, depth: int = 0) -> None:
        """Open *path* and merge it.

        Raises
        ------
        OpenConfigError
            Naming the config flag, when *path* cannot be opened or the
            include chain is deeper than ``limits.max_include_depth``.
        """
        limits = self._registry.limits
        if depth >= limits.max_include_depth:
            raise OpenConfigError(
                self._config_name(path),
                hint=f"Config files nest deeper than {limits.max_include_depth} levels at {path}.",
            )
        try:
            source = self._opener(path, line_capacity=limits.line_capacity)
        except OSError as exc:
            raise OpenConfigError(
                self._config_name(path),
                hint=f"{path}: {exc.strerror or exc}",
            ) from exc

        logger.debug("merging config file %s (depth %d)", path, depth)
        with source:
            self.merge_source(source, depth=depth)

    def merge_source(self, source: KeyValueSource, *, depth: int = 0) -> None:
        """Merge every pair of an already-open *source*.

        Raises
        ------
        UnknownFlagError
            For a key matching no flag (unless ignoring unknown keys).
        MissingValueError
            For a known key with nothing after ``=``.
        InvalidValueError
            For a value of the wrong kind, or a malformed line.
        OpenConfigError
            When a chained config file cannot be opened.
        """
        registry = self._registry
        limits = registry.limits

        while True:
            key = self._next_key(source)
            if key is None:
                return

            if registry.is_config_key(key):
                path = source.read_value(limits.value_capacity)
                if path is None:
                    raise MissingValueError(key)
                self.merge_file(path, depth=depth + 1)
                continue

            spec = registry.lookup_by_bare_key(key)
            if spec is None:
                if registry.ignore_unknown:
                    logger.debug("%s:%d: skipping unknown key %r", source.name, source.lineno, key)
                    continue
                raise UnknownFlagError(key)

            value = source.read_value(limits.value_capacity)
            if value is None:
                raise MissingValueError(spec.name)
            registry.assign(spec, value)
            logger.debug("%s:%d: set %s", source.name, source.lineno, spec.name)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _next_key(self, source: KeyValueSource) -> str | None:
        """Read a key, routing INI-level errors into the parse taxonomy."""
        registry = self._registry
        while True:
            try:
                return source.read_key(registry.limits.key_capacity)
            except IniSyntaxError as exc:
                raise InvalidValueError(f"{source.name}:{exc.lineno}", hint=str(exc)) from exc
            except IniOverflowError as exc:
                if not registry.ignore_unknown:
                    raise UnknownFlagError(exc.key, hint=str(exc)) from exc
                logger.debug("%s:%d: skipping overlong key", source.name, exc.lineno)

    def _config_name(self, path: str) -> str:
        config = self._registry.config
        return config.name if config is not None else path
