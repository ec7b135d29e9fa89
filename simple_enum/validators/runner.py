"""Validation runner for host instances."""

from typing import Any
from weakref import WeakKeyDictionary

from ..schema.errors import ConfigurationError
from ..schema.registry import lookup
from .base import ValidationResult, Validator
from .enum_range import EnumRangeValidator, parse_validation_options

_validators: "WeakKeyDictionary[type, list[Validator]]" = WeakKeyDictionary()


def add_validator(host: type, validator: Validator) -> None:
    """Register a validator on a host type."""
    _validators.setdefault(host, []).append(validator)


def validators_for(host: type) -> list[Validator]:
    """Get the validators of a host type, base classes first."""
    found: list[Validator] = []
    for klass in reversed(host.__mro__):
        found.extend(_validators.get(klass, []))
    return found


def declare_enum_validation(host: type, attribute: str, **options: Any) -> EnumRangeValidator:
    """Validate that the raw stored value of an enum attribute is one of its codes.

    Args:
        host: The host type the enum was declared on.
        attribute: The enum attribute name.
        **options: ``if``, ``unless``, ``allow_nil`` and ``message``.

    Returns:
        The registered validator.

    Raises:
        ConfigurationError: If the attribute is not an enum of the host or an
            option is invalid.
    """
    definition = lookup(host, attribute)
    if definition is None:
        raise ConfigurationError(
            f"Cannot validate '{attribute}': no enum declared on {host.__name__}"
        )
    validator = EnumRangeValidator.from_options(
        definition, parse_validation_options(options)
    )
    add_validator(host, validator)
    return validator


def validate_instance(instance: Any) -> ValidationResult:
    """Run every validator registered on an instance's type.

    Args:
        instance: The host object to check.

    Returns:
        Combined ValidationResult from all validators.
    """
    result = ValidationResult()
    for validator in validators_for(type(instance)):
        result.violations.extend(validator.validate(instance))
    return result
