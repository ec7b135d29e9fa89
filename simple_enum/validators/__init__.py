"""Validation of enum attributes."""

from .base import ValidationResult, Validator, Violation
from .enum_range import EnumRangeValidator, ValidationOptions
from .runner import (
    add_validator,
    declare_enum_validation,
    validate_instance,
    validators_for,
)

__all__ = [
    "EnumRangeValidator",
    "ValidationOptions",
    "ValidationResult",
    "Validator",
    "Violation",
    "add_validator",
    "declare_enum_validation",
    "validate_instance",
    "validators_for",
]
