"""Access to the raw integer field on host objects.

A host may provide ``read_attribute(name)`` and ``write_attribute(name, value)``
to route reads and writes through its own persistence layer. Otherwise the
field is a plain instance attribute.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FieldStorage(Protocol):
    """Host objects with their own raw field accessors."""

    def read_attribute(self, name: str) -> Any: ...

    def write_attribute(self, name: str, value: Any) -> None: ...


def read_field(obj: Any, name: str) -> Any:
    """Read a raw field value; a missing field reads as None."""
    if isinstance(obj, FieldStorage):
        return obj.read_attribute(name)
    return getattr(obj, name, None)


def write_field(obj: Any, name: str, value: Any) -> None:
    """Write a raw field value."""
    if isinstance(obj, FieldStorage):
        obj.write_attribute(name, value)
    else:
        setattr(obj, name, value)
