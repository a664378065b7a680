"""tinyflags: typed command-line flags and INI config files for small tools.

Declare flags bound to storage you own, then parse ``sys.argv`` and/or an
INI-style file into that storage.
"""

import logging

from tinyflags.core.destinations import AttributeDestination, Value
from tinyflags.core.limits import Limits
from tinyflags.core.models import ErrorKind, ErrorRecord, FlagKind, FlagSpec
from tinyflags.flagset import FlagSet, default_flagset, reset_default_flagset
from tinyflags.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "AttributeDestination",
    "ErrorKind",
    "ErrorRecord",
    "FlagKind",
    "FlagSet",
    "FlagSpec",
    "Limits",
    "Value",
    "__version__",
    "default_flagset",
    "reset_default_flagset",
]
