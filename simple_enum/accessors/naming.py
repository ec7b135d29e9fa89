"""Names of the members generated for an enum definition."""

from dataclasses import dataclass, field

from ..schema.models import EnumDefinition

_IRREGULAR_PLURALS = {
    "person": "people",
    "child": "children",
    "man": "men",
    "woman": "women",
    "datum": "data",
    "medium": "media",
    "criterion": "criteria",
    "index": "indices",
    "matrix": "matrices",
    "status": "statuses",
    "address": "addresses",
}


def pluralize(word: str) -> str:
    """Pluralize a snake_case attribute name.

    Only the last underscore-separated word is inflected, so
    ``payment_status`` becomes ``payment_statuses``.

    Examples:
        >>> pluralize("gender")
        'genders'
        >>> pluralize("category")
        'categories'
        >>> pluralize("status")
        'statuses'
    """
    if not word:
        return word

    head, sep, last = word.rpartition("_")
    if not last:
        return word + "s"

    lower = last.lower()
    if lower in _IRREGULAR_PLURALS:
        plural = _IRREGULAR_PLURALS[lower]
        if last.isupper():
            plural = plural.upper()
        return head + sep + plural

    if lower.endswith(("s", "x", "z", "ch", "sh")):
        plural = last + "es"
    elif lower.endswith("y") and len(lower) > 1 and lower[-2] not in "aeiou":
        plural = last[:-1] + "ies"
    elif lower.endswith("fe"):
        plural = last[:-2] + "ves"
    elif lower.endswith(("elf", "alf", "olf", "eaf", "oaf", "arf")):
        plural = last[:-1] + "ves"
    else:
        plural = last + "s"
    return head + sep + plural


@dataclass
class GeneratedNames:
    """Every member name installed on a host for one definition."""

    getter: str
    plural: str
    predicates: dict[str, str] = field(default_factory=dict)
    bang_setters: dict[str, str] = field(default_factory=dict)
    constants: dict[str, str] = field(default_factory=dict)

    def all_names(self) -> list[str]:
        """All generated names, getter first."""
        return [
            self.getter,
            self.plural,
            *self.predicates.values(),
            *self.bang_setters.values(),
            *self.constants.values(),
        ]


def shortcut_name(definition: EnumDefinition, name: str) -> str:
    """Apply the definition's prefix to a symbolic name."""
    if definition.prefix:
        return f"{definition.prefix}_{name}"
    return name


def plural_name(definition: EnumDefinition) -> str:
    """Name of the class-level plural accessor."""
    plural = pluralize(definition.attribute)
    return plural.upper() if definition.upcase else plural


def generated_names(definition: EnumDefinition) -> GeneratedNames:
    """Compute the names generated for a definition.

    Predicates are ``is_<prefix_>value``, bang setters ``set_<prefix_>value``
    and class constants ``<prefix_>value``. Slim definitions only get the
    getter and the plural accessor.
    """
    names = GeneratedNames(getter=definition.attribute, plural=plural_name(definition))
    if not definition.shortcuts:
        return names

    for name in definition.names:
        short = shortcut_name(definition, name)
        names.predicates[name] = f"is_{short}"
        names.bang_setters[name] = f"set_{short}"
        names.constants[name] = short
    return names
