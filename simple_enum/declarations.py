"""Declaring enum attributes on host classes."""

from typing import Any, Callable, TypeVar

from .accessors.generator import install
from .schema.builder import build_definition
from .schema.models import EnumDefinition
from .validators.runner import declare_enum_validation

T = TypeVar("T", bound=type)


def declare_enum(host: type, attribute: str, values: Any, **options: Any) -> EnumDefinition:
    """Declare an enum attribute on a host class.

    Builds the definition, installs its accessors and registers it. Declaring
    the same attribute again replaces the previous definition.

    Args:
        host: The class to install the attribute on.
        attribute: The logical attribute name, e.g. ``gender``.
        values: Ordered names, a name -> code mapping or an integer Enum class.
        **options: ``column``, ``prefix``, ``slim``, ``whiny`` and ``upcase``.

    Returns:
        The registered definition.

    Raises:
        ConfigurationError: If the declaration is malformed. Nothing is
            installed in that case.

    Example:
        >>> class User:
        ...     gender_cd = None
        >>> _ = declare_enum(User, "gender", {"female": 1, "male": 0})
        >>> User.genders("male")
        0
    """
    definition = build_definition(attribute, values, **options)
    install(host, definition)
    return definition


def as_enum(attribute: str, values: Any, **options: Any) -> Callable[[T], T]:
    """Class decorator form of declare_enum."""

    def decorator(cls: T) -> T:
        declare_enum(cls, attribute, values, **options)
        return cls

    return decorator


def validates_as_enum(attribute: str, **options: Any) -> Callable[[T], T]:
    """Class decorator form of declare_enum_validation.

    Must be listed above the ``as_enum`` decorator of the same attribute, so
    it runs after the enum is declared.
    """

    def decorator(cls: T) -> T:
        declare_enum_validation(cls, attribute, **options)
        return cls

    return decorator
