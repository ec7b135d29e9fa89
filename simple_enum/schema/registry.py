"""Process-wide registry of enum definitions per host type."""

import logging
from weakref import WeakKeyDictionary

from .models import EnumDefinition

logger = logging.getLogger(__name__)

# Host types are held weakly so definitions live exactly as long as the type.
_definitions: "WeakKeyDictionary[type, dict[str, EnumDefinition]]" = WeakKeyDictionary()


def register(host: type, definition: EnumDefinition) -> EnumDefinition | None:
    """Register a definition on a host type.

    Re-registering an attribute replaces the previous definition.

    Returns:
        The definition that was replaced, if any.
    """
    entries = _definitions.setdefault(host, {})
    previous = entries.pop(definition.attribute, None)
    entries[definition.attribute] = definition
    if previous is not None:
        logger.debug("Replaced enum %s.%s", host.__name__, definition.attribute)
    return previous


def lookup(host: type, attribute: str) -> EnumDefinition | None:
    """Find the definition of an attribute on a host type or its bases."""
    for klass in _mro(host):
        entries = _definitions.get(klass)
        if entries and attribute in entries:
            return entries[attribute]
    return None


def lookup_own(host: type, attribute: str) -> EnumDefinition | None:
    """Find a definition declared directly on a host type."""
    return _definitions.get(host, {}).get(attribute)


def definitions_for(host: type) -> list[EnumDefinition]:
    """Get every definition visible on a host type.

    Definitions from base classes come first; a subclass re-declaring an
    attribute shadows the base definition.
    """
    found: dict[str, EnumDefinition] = {}
    for klass in reversed(_mro(host)):
        for attribute, definition in _definitions.get(klass, {}).items():
            found.pop(attribute, None)
            found[attribute] = definition
    return list(found.values())


def _mro(host: type) -> tuple[type, ...]:
    if not isinstance(host, type):
        host = type(host)
    return host.__mro__
