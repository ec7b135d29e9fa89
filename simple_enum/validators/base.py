"""Violations and validation results."""

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class Violation:
    """An attribute whose stored value failed a check."""

    attribute: str
    message: str
    column: str | None = None
    value: Any = None

    def __str__(self) -> str:
        return f"{self.attribute} {self.message}"


@runtime_checkable
class Validator(Protocol):
    """Anything that can check an instance and report violations."""

    def validate(self, instance: Any) -> list[Violation]: ...


@dataclass
class ValidationResult:
    """Violations collected from every validator of an instance."""

    violations: list[Violation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def errors_on(self, attribute: str) -> list[str]:
        """Get the messages attached to an attribute."""
        return [v.message for v in self.violations if v.attribute == attribute]
