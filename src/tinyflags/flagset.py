"""The public :class:`FlagSet` facade.

Wires the core registry, argument parser and config merger to the INI
reader from the infrastructure layer.  The lifecycle is: register
flags, parse once, read the destinations.

A lazily created process-wide instance is available through
:func:`default_flagset` for small scripts that do not want to pass a
flag set around.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TextIO, TypeVar

from tinyflags.core.arg_parser import ArgumentParser
from tinyflags.core.config_merger import ConfigMerger
from tinyflags.core.destinations import Destination
from tinyflags.core.limits import DEFAULT_LIMITS, Limits
from tinyflags.core.models import NO_ERROR, ConfigFlag, ErrorRecord, FlagKind, FlagSpec
from tinyflags.core.protocols import ConfigOpener
from tinyflags.core.registry import Registry
from tinyflags.exceptions import FlagParseError
from tinyflags.infra.ini_reader import IniReader

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=Destination)


class FlagSet:
    """A set of typed flags plus an optional config-file flag.

    Usage::

        fs = FlagSet()
        verbose = fs.bool_var(Value(), "verbose", "v", "Print more")
        port = fs.int_var(Value(), "port", "p", 8080, "Port to listen on")
        fs.config_flag("config", "c", "Read flags from an INI file")
        if not fs.parse(sys.argv):
            report_and_exit(fs)

    Parameters
    ----------
    limits:
        Capacity overrides; module defaults otherwise.
    opener:
        How config files are opened; :meth:`IniReader.open` by default.
    """

    def __init__(
        self,
        *,
        limits: Limits = DEFAULT_LIMITS,
        opener: ConfigOpener | None = None,
    ) -> None:
        self._registry = Registry(limits)
        self._merger = ConfigMerger(self._registry, opener or IniReader.open)
        self._parser = ArgumentParser(self._registry, self._merger)
        self.error: ErrorRecord = NO_ERROR
        self._failure: FlagParseError | None = None

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def flags(self) -> tuple[FlagSpec, ...]:
        """Registered flags in declaration order."""
        return tuple(self._registry)

    @property
    def config(self) -> ConfigFlag | None:
        return self._registry.config

    @property
    def limits(self) -> Limits:
        return self._registry.limits

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def ignore_unknown(self) -> bool:
        return self._registry.ignore_unknown

    @ignore_unknown.setter
    def ignore_unknown(self, ignore: bool) -> None:
        self._registry.ignore_unknown = ignore

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def bool_var(self, dst: D, name: str, short_name: str | None, description: str) -> D:
        """Register a boolean flag; its default is always ``False``."""
        self._registry.register(FlagKind.BOOL, dst, name, short_name, False, description)
        return dst

    def string_var(
        self, dst: D, name: str, short_name: str | None, default: str, description: str
    ) -> D:
        self._registry.register(FlagKind.STRING, dst, name, short_name, default, description)
        return dst

    def int_var(
        self, dst: D, name: str, short_name: str | None, default: int, description: str
    ) -> D:
        self._registry.register(FlagKind.INT, dst, name, short_name, default, description)
        return dst

    def float_var(
        self, dst: D, name: str, short_name: str | None, default: float, description: str
    ) -> D:
        self._registry.register(FlagKind.FLOAT, dst, name, short_name, default, description)
        return dst

    def double_var(
        self, dst: D, name: str, short_name: str | None, default: float, description: str
    ) -> D:
        self._registry.register(FlagKind.DOUBLE, dst, name, short_name, default, description)
        return dst

    def time_var(
        self, dst: D, name: str, short_name: str | None, default: int, description: str
    ) -> D:
        """Register a time flag; values are epoch seconds (UTC)."""
        self._registry.register(FlagKind.TIME, dst, name, short_name, default, description)
        return dst

    def config_flag(self, name: str, short_name: str | None, description: str) -> ConfigFlag:
        """Enable a flag whose value names an INI file to merge.

        The same name used as a key inside a config file chains to
        another file.
        """
        return self._registry.set_config_flag(name, short_name, description)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, argv: Sequence[str]) -> bool:
        """Parse command-line tokens, program name first.

        Returns ``False`` on failure; :attr:`error` then holds the kind
        and offending name.  Destinations written before the failing
        token keep their new values.
        """
        return self._run(self._parser.parse, argv)

    def load_config(self, source: str | TextIO) -> bool:
        """Merge an INI file (by path) or an open text stream.

        A stream passed here is read but never closed.
        """
        if isinstance(source, str):
            return self._run(self._merger.merge_file, source)
        reader = IniReader.from_stream(source, line_capacity=self.limits.line_capacity)
        with reader:
            return self._run(self._merger.merge_source, reader)

    def _run(self, step: Callable[..., None], *args: object) -> bool:
        try:
            step(*args)
        except FlagParseError as exc:
            if self._failure is None:
                self._failure = exc
                self.error = exc.record(self.limits.max_name_length)
            logger.debug("parse stopped: %s", exc)
            return False
        return True

    def raise_for_error(self) -> None:
        """Raise the stored failure as a :class:`FlagParseError`, if any."""
        if self._failure is not None:
            raise self._failure


# ---------------------------------------------------------------------------
# Process-wide default flag set
# ---------------------------------------------------------------------------

_default: FlagSet | None = None


def default_flagset() -> FlagSet:
    """Return the process-wide flag set, creating it on first use."""
    global _default
    if _default is None:
        _default = FlagSet()
    return _default


def reset_default_flagset() -> None:
    """Drop the process-wide flag set (mainly for tests)."""
    global _default
    _default = None
