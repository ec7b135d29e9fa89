"""simple_enum: symbolic enum attributes over integer storage fields."""

from .declarations import as_enum, declare_enum, validates_as_enum
from .schema import (
    ConfigurationError,
    EnumDefinition,
    EnumError,
    InvalidEnumValueError,
    UnknownEnumValueError,
    build_definition,
    definitions_for,
    lookup,
)
from .validators import (
    ValidationResult,
    declare_enum_validation,
    validate_instance,
)

__all__ = [
    "ConfigurationError",
    "EnumDefinition",
    "EnumError",
    "InvalidEnumValueError",
    "UnknownEnumValueError",
    "ValidationResult",
    "as_enum",
    "build_definition",
    "declare_enum",
    "declare_enum_validation",
    "definitions_for",
    "lookup",
    "validate_instance",
    "validates_as_enum",
]
