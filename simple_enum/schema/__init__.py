"""Schema layer: enum definitions and their registry."""

from .builder import build_definition, parse_options
from .errors import (
    ConfigurationError,
    EnumError,
    InvalidEnumValueError,
    UnknownEnumValueError,
)
from .models import EnumDefinition, EnumKey, EnumOptions
from .registry import definitions_for, lookup, register

__all__ = [
    "ConfigurationError",
    "EnumError",
    "InvalidEnumValueError",
    "UnknownEnumValueError",
    "EnumDefinition",
    "EnumKey",
    "EnumOptions",
    "build_definition",
    "definitions_for",
    "lookup",
    "parse_options",
    "register",
]
