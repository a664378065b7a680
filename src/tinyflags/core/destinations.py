"""Handles over caller-owned storage.

A flag never owns the value it parses: it writes through a
:class:`Destination` the caller created and keeps.  Two handles are
provided:

* :class:`Value`: a standalone box, read back via ``.value``.
* :class:`AttributeDestination`: writes an attribute of an existing
  object, e.g. a field of the program's own options dataclass.

Any object with ``get()`` / ``set()`` satisfies the protocol.
"""

from __future__ import annotations

from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")


class Destination(Protocol):
    """Contract for storage a flag writes into."""

    def get(self) -> Any:
        ...  # pragma: no cover

    def set(self, value: Any) -> None:
        ...  # pragma: no cover


class Value(Generic[T]):
    """A mutable box holding one flag value.

    Usage::

        port = fs.int_var(Value(), "port", "p", 8080, "Port to listen on")
        fs.parse(sys.argv)
        serve(port.value)
    """

    __slots__ = ("value",)

    def __init__(self, value: T | None = None) -> None:
        self.value: T | None = value

    def get(self) -> T | None:
        return self.value

    def set(self, value: T) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Value({self.value!r})"


class AttributeDestination:
    """Write a flag value to ``setattr(target, attribute, ...)``."""

    __slots__ = ("target", "attribute")

    def __init__(self, target: object, attribute: str) -> None:
        self.target = target
        self.attribute = attribute

    def get(self) -> Any:
        return getattr(self.target, self.attribute)

    def set(self, value: Any) -> None:
        setattr(self.target, self.attribute, value)

    def __repr__(self) -> str:
        return f"AttributeDestination({type(self.target).__name__}.{self.attribute})"
