"""Installing enum accessors on host types."""

import logging
from enum import Enum
from typing import Any, Callable
from weakref import WeakKeyDictionary

from ..schema.errors import ConfigurationError, InvalidEnumValueError, UnknownEnumValueError
from ..schema.models import EnumDefinition, as_code
from ..schema.registry import lookup_own, register
from .naming import GeneratedNames, generated_names
from .storage import read_field, write_field

logger = logging.getLogger(__name__)

# host -> generated member name -> attribute that last installed it
_owners: "WeakKeyDictionary[type, dict[str, str]]" = WeakKeyDictionary()


class EnumAttribute:
    """Data descriptor translating between symbolic names and stored codes.

    Accessed on the class it returns itself, so ``User.gender.definition``
    gives the definition it is bound to.
    """

    def __init__(self, definition: EnumDefinition):
        self.definition = definition
        self.__doc__ = f"Enum attribute stored in '{definition.column}'."

    def __get__(self, obj: Any, owner: type | None = None) -> Any:
        if obj is None:
            return self
        return self.definition.name_for(read_field(obj, self.definition.column))

    def __set__(self, obj: Any, value: Any) -> None:
        assign(obj, self.definition, value)

    def __repr__(self) -> str:
        return f"<EnumAttribute {self.definition.attribute} -> {self.definition.column}>"


def assign(obj: Any, definition: EnumDefinition, value: Any) -> None:
    """Store the code for value in the object's raw field.

    Raises:
        InvalidEnumValueError: If the value is not part of the enum and the
            definition is whiny. The field is left unchanged.
    """
    if value is None:
        write_field(obj, definition.column, None)
        return

    code = definition.code_for(value)
    if code is not None:
        write_field(obj, definition.column, code)
    elif definition.whiny:
        raise InvalidEnumValueError(definition.attribute, value)
    else:
        write_field(obj, definition.column, value)


def code_of(definition: EnumDefinition, value: Any) -> int:
    """Look up the code of a symbolic name.

    Raises:
        UnknownEnumValueError: If the name is not part of the enum.
    """
    name = value.value if isinstance(value, Enum) else value
    if isinstance(name, str):
        code = definition.code_for(name)
        if code is not None:
            return code
    raise UnknownEnumValueError(definition.attribute, value)


def install(host: type, definition: EnumDefinition) -> GeneratedNames:
    """Install the accessors of a definition on a host type and register it.

    Every name is checked before anything is set, so a failing declaration
    leaves the host untouched. Re-installing an attribute first removes the
    members generated for its previous definition that no later enum has
    taken over.

    Raises:
        ConfigurationError: If the host is not a class or generated names clash.
    """
    if not isinstance(host, type):
        raise ConfigurationError(f"Enums can only be declared on classes, got {host!r}")

    names = generated_names(definition)
    check_generated_names(definition, names)
    members = _build_members(definition, names)

    previous = lookup_own(host, definition.attribute)
    if previous is not None:
        _remove_members(host, definition.attribute, generated_names(previous))

    owners = _owners.setdefault(host, {})
    for name, member in members.items():
        if hasattr(host, name):
            logger.warning(
                "Enum %s.%s overrides existing member '%s'",
                host.__name__,
                definition.attribute,
                name,
            )
        setattr(host, name, member)
        owners[name] = definition.attribute

    register(host, definition)
    logger.debug(
        "Declared enum %s.%s with %d value(s)",
        host.__name__,
        definition.attribute,
        len(definition.pairs),
    )
    return names


def check_generated_names(definition: EnumDefinition, names: GeneratedNames) -> None:
    """Reject definitions that would generate a name twice or shadow their column.

    Raises:
        ConfigurationError: On the first clashing name.
    """
    seen: set[str] = {definition.column}
    for name in names.all_names():
        if name in seen:
            raise ConfigurationError(
                f"Enum '{definition.attribute}' generates the name '{name}' twice; "
                "use the prefix option to namespace its values"
            )
        seen.add(name)


def _build_members(definition: EnumDefinition, names: GeneratedNames) -> dict[str, Any]:
    members: dict[str, Any] = {
        names.getter: EnumAttribute(definition),
        names.plural: classmethod(_make_plural(definition, names.plural)),
    }
    for name, code in definition.pairs:
        if name in names.predicates:
            members[names.predicates[name]] = _make_predicate(
                definition, code, names.predicates[name]
            )
        if name in names.bang_setters:
            members[names.bang_setters[name]] = _make_bang_setter(
                definition, name, names.bang_setters[name]
            )
        if name in names.constants:
            members[names.constants[name]] = code
    return members


def _remove_members(host: type, attribute: str, names: GeneratedNames) -> None:
    owners = _owners.get(host, {})
    for name in names.all_names():
        if owners.get(name) != attribute:
            continue
        del owners[name]
        if name in host.__dict__:
            delattr(host, name)


def _make_plural(definition: EnumDefinition, member_name: str) -> Callable[..., Any]:
    def plural(cls, value: Any = None) -> Any:
        if value is None:
            return definition.mapping()
        return code_of(definition, value)

    plural.__name__ = plural.__qualname__ = member_name
    plural.__doc__ = (
        f"Return the {definition.attribute} mapping, or the code of one value."
    )
    return plural


def _make_predicate(
    definition: EnumDefinition, code: int, member_name: str
) -> Callable[[Any], bool]:
    def predicate(self) -> bool:
        return as_code(read_field(self, definition.column)) == code

    predicate.__name__ = predicate.__qualname__ = member_name
    return predicate


def _make_bang_setter(
    definition: EnumDefinition, name: str, member_name: str
) -> Callable[[Any], Enum]:
    member = definition.keys[name]

    def bang_setter(self) -> Enum:
        assign(self, definition, member)
        return member

    bang_setter.__name__ = bang_setter.__qualname__ = member_name
    return bang_setter
