"""Models for enum declarations."""

import operator
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def as_code(value: Any) -> int | None:
    """Return value as an integer code, or None if it is not integer-like."""
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


class EnumOptions(BaseModel):
    """Options accepted by an enum declaration."""

    model_config = ConfigDict(extra="forbid")

    column: str | None = None
    prefix: bool | str | None = None
    slim: bool = False
    whiny: bool = True
    upcase: bool = False

    @field_validator("column")
    @classmethod
    def check_column(cls, value: str | None) -> str | None:
        if value is not None and not value.isidentifier():
            raise ValueError(f"column must be an identifier, got {value!r}")
        return value

    @field_validator("prefix")
    @classmethod
    def check_prefix(cls, value: bool | str | None) -> bool | str | None:
        if isinstance(value, str) and not value.isidentifier():
            raise ValueError(f"prefix must be an identifier, got {value!r}")
        return value


class EnumKey(str, Enum):
    """Base of the generated key enums; a member prints as its name."""

    __str__ = str.__str__
    __format__ = str.__format__


@dataclass(frozen=True)
class EnumDefinition:
    """Immutable, bidirectional name/code table for one enum attribute.

    ``pairs`` keeps declaration order. ``keys`` is an EnumKey subclass whose
    members are the symbolic names, so a member compares equal to its name.
    """

    attribute: str
    column: str
    pairs: tuple[tuple[str, int], ...]
    keys: type[EnumKey] = field(compare=False, repr=False)
    prefix: str | None = None
    shortcuts: bool = True
    whiny: bool = True
    upcase: bool = False

    @cached_property
    def _codes(self) -> dict[str, int]:
        return dict(self.pairs)

    @cached_property
    def _names(self) -> dict[int, str]:
        return {code: name for name, code in self.pairs}

    @property
    def names(self) -> list[str]:
        """Symbolic names in declaration order."""
        return [name for name, _ in self.pairs]

    @property
    def codes(self) -> list[int]:
        """Codes in declaration order."""
        return [code for _, code in self.pairs]

    def mapping(self) -> dict[str, int]:
        """Return a fresh ordered name -> code dict."""
        return dict(self.pairs)

    def has_code(self, value: Any) -> bool:
        """Check whether a raw stored value is one of the codes."""
        code = as_code(value)
        return code is not None and code in self._names

    def code_for(self, value: Any) -> int | None:
        """Resolve a name, enum member or code to its code.

        Returns None if the value is not part of the enum.
        """
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, str):
            return self._codes.get(value)
        if self.has_code(value):
            return as_code(value)
        return None

    def name_for(self, code: Any) -> EnumKey | None:
        """Resolve a stored code to its key member, or None if unmapped."""
        if not self.has_code(code):
            return None
        return self.keys[self._names[as_code(code)]]
