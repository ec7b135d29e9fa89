"""Enum declaration and assignment exceptions."""

from typing import Any


class EnumError(Exception):
    """Base exception for simple_enum errors."""

    pass


class ConfigurationError(EnumError):
    """Raised when an enum declaration is malformed."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class InvalidEnumValueError(EnumError, ValueError):
    """Raised when assigning a value that is not part of the enum."""

    def __init__(self, attribute: str, value: Any):
        self.attribute = attribute
        self.value = value
        super().__init__(f"Invalid value {value!r} for enum '{attribute}'")


class UnknownEnumValueError(EnumError, KeyError):
    """Raised when looking up a name that is not part of the enum."""

    def __init__(self, attribute: str, value: Any):
        self.attribute = attribute
        self.value = value
        super().__init__(f"Unknown value {value!r} for enum '{attribute}'")

    def __str__(self) -> str:
        return str(self.args[0])
