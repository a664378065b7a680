"""Core layer: flag models, coercion, lookup and the parse state machines.

Rules
-----
* No ``print()`` calls.
* No opening of files; config sources arrive through
  :class:`~tinyflags.core.protocols.ConfigOpener`.
* No imports from ``cli`` or ``infra``.
* Only :class:`~tinyflags.exceptions.TinyflagsError` subclasses escape.
"""

from tinyflags.core.models import ConfigFlag, ErrorKind, ErrorRecord, FlagKind, FlagSpec, KeyValue
from tinyflags.core.destinations import AttributeDestination, Destination, Value
from tinyflags.core.limits import Limits
from tinyflags.core.registry import Registry
from tinyflags.core.config_merger import ConfigMerger
from tinyflags.core.arg_parser import ArgumentParser, TokenState
from tinyflags.core.protocols import ConfigOpener, KeyValueSource

__all__: list[str] = [
    "ArgumentParser",
    "AttributeDestination",
    "ConfigFlag",
    "ConfigMerger",
    "ConfigOpener",
    "Destination",
    "ErrorKind",
    "ErrorRecord",
    "FlagKind",
    "FlagSpec",
    "KeyValue",
    "KeyValueSource",
    "Limits",
    "Registry",
    "TokenState",
    "Value",
]
