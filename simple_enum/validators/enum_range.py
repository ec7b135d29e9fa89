"""Validator checking that a raw stored code belongs to its enum."""

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..accessors.storage import read_field
from ..schema.builder import convert_errors
from ..schema.errors import ConfigurationError
from ..schema.models import EnumDefinition
from ..schema.registry import lookup
from .base import Violation

DEFAULT_MESSAGE = "is invalid"

Condition = Callable[[Any], Any] | str


class ValidationOptions(BaseModel):
    """Options accepted by an enum validation declaration."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    if_: Condition | None = Field(default=None, alias="if")
    unless: Condition | None = None
    allow_nil: bool = False
    message: str | None = None


def parse_validation_options(options: dict[str, Any]) -> ValidationOptions:
    """Validate enum validation options.

    Raises:
        ConfigurationError: If an option is unknown or has the wrong type.
    """
    try:
        return ValidationOptions.model_validate(options)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid validation options: {len(e.errors())} error(s)",
            convert_errors(e),
        ) from e


class EnumRangeValidator:
    """Reports the raw stored value of an enum attribute when it is not a code.

    The check reads the storage field directly, so values stored by a
    non-whiny setter or written behind the accessor's back are caught.
    """

    def __init__(
        self,
        definition: EnumDefinition,
        allow_nil: bool = False,
        message: str | None = None,
        if_: Condition | None = None,
        unless: Condition | None = None,
    ):
        self.definition = definition
        self.allow_nil = allow_nil
        self.message = message or DEFAULT_MESSAGE
        self.if_ = if_
        self.unless = unless

    @classmethod
    def from_options(
        cls, definition: EnumDefinition, options: ValidationOptions
    ) -> "EnumRangeValidator":
        return cls(
            definition,
            allow_nil=options.allow_nil,
            message=options.message,
            if_=options.if_,
            unless=options.unless,
        )

    @property
    def attribute(self) -> str:
        return self.definition.attribute

    def applies_to(self, instance: Any) -> bool:
        """Evaluate the if/unless conditions for an instance."""
        if self.if_ is not None and not _evaluate(self.if_, instance):
            return False
        if self.unless is not None and _evaluate(self.unless, instance):
            return False
        return True

    def validate(self, instance: Any) -> list[Violation]:
        if not self.applies_to(instance):
            return []

        # A re-declared enum replaces the definition bound at registration
        definition = lookup(type(instance), self.attribute) or self.definition
        raw = read_field(instance, definition.column)
        if raw is None and self.allow_nil:
            return []
        if raw is not None and definition.has_code(raw):
            return []

        return [
            Violation(
                attribute=definition.attribute,
                message=self.message,
                column=definition.column,
                value=raw,
            )
        ]


def _evaluate(condition: Condition, instance: Any) -> bool:
    # A string names a method or attribute on the instance
    if isinstance(condition, str):
        target = getattr(instance, condition)
        return bool(target() if callable(target) else target)
    return bool(condition(instance))
