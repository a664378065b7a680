"""Command-line token state machine.

A single left-to-right pass over the tokens with no backtracking.  The
first token (the program name) is discarded; every following token is
classified into a :class:`TokenState` and handled.  The parse ends in
*Done* by returning normally or in *Failed* by raising a
:class:`~tinyflags.exceptions.FlagParseError`, after which no further
token is consumed.

Repeated flags overwrite each other: the last occurrence wins.
"""

from __future__ import annotations

import enum
import logging
from collections import deque
from collections.abc import Iterable

from tinyflags.core.config_merger import ConfigMerger
from tinyflags.core.models import FlagKind, FlagSpec
from tinyflags.core.registry import Registry, is_help_token
from tinyflags.exceptions import HelpRequested, MissingValueError, UnknownFlagError

logger = logging.getLogger(__name__)


class TokenState(enum.Enum):
    """Classification of one command-line token."""

    CONFIG = "config"
    MATCHED_BOOL = "matched-bool"
    MATCHED_VALUE = "matched-value"
    UNMATCHED = "unmatched"
    HELP = "help"


class ArgumentParser:
    """Parse command-line tokens into the flags of *registry*.

    Parameters
    ----------
    registry:
        The flags to match against.
    merger:
        Used when the config flag appears on the command line.
    """

    def __init__(self, registry: Registry, merger: ConfigMerger) -> None:
        self._registry: Registry = registry
        self._merger: ConfigMerger = merger

    def classify(self, token: str) -> tuple[TokenState, FlagSpec | None]:
        """Decide how *token* is handled, without consuming anything.

        The config flag takes precedence over regular flags.  Help is
        only recognised when ignore-unknown is off.  A spec is returned
        for the two matched states only.
        """
        registry = self._registry
        if registry.is_config_token(token):
            return TokenState.CONFIG, None

        spec = registry.lookup_by_token(token)
        if spec is not None:
            if spec.kind is FlagKind.BOOL:
                return TokenState.MATCHED_BOOL, spec
            return TokenState.MATCHED_VALUE, spec

        if not registry.ignore_unknown and is_help_token(token):
            return TokenState.HELP, None
        return TokenState.UNMATCHED, None

    def parse(self, argv: Iterable[str]) -> None:
        """Consume *argv* (program name first).

        Raises
        ------
        HelpRequested
            On ``--help`` / ``-h``.
        UnknownFlagError
            Naming the literal token, for an unmatched token.
        MissingValueError
            When a value-taking flag or the config flag is last.
        InvalidValueError
            When a value cannot be coerced.
        OpenConfigError
            When a config file named on the command line cannot be opened.
        """
        tokens = deque(argv)
        if tokens:
            tokens.popleft()

        while tokens:
            token = tokens.popleft()
            state, spec = self.classify(token)

            if spec is not None:
                if state is TokenState.MATCHED_BOOL:
                    spec.destination.set(True)
                    logger.debug("%s -> %s = true", token, spec.name)
                    continue
                if not tokens:
                    raise MissingValueError(spec.name)
                self._registry.assign(spec, tokens.popleft())
                logger.debug("%s -> %s", token, spec.name)

            elif state is TokenState.CONFIG:
                if not tokens:
                    raise MissingValueError(token)
                self._merger.merge_file(tokens.popleft())

            elif state is TokenState.HELP:
                raise HelpRequested(token)

            elif self._registry.ignore_unknown:
                logger.debug("ignoring unknown token %r", token)

            else:
                raise UnknownFlagError(token)
