"""Building enum definitions from value specifications."""

import keyword
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from pydantic import ValidationError

from .errors import ConfigurationError
from .models import EnumDefinition, EnumKey, EnumOptions, as_code

# Names the key Enum cannot hold as members
_RESERVED_NAMES = frozenset({"mro"})


def build_definition(attribute: str, values: Any, **options: Any) -> EnumDefinition:
    """Build an EnumDefinition from a value specification.

    Args:
        attribute: The logical attribute name, e.g. ``gender``.
        values: An ordered sequence of names (coded 0..n-1 in order), a
            mapping of name -> code, or an Enum class with integer values.
        **options: Declaration options (column, prefix, slim, whiny, upcase).

    Returns:
        The immutable EnumDefinition.

    Raises:
        ConfigurationError: If the attribute, values or options are malformed.
    """
    if not _is_identifier(attribute):
        raise ConfigurationError(f"Enum attribute must be an identifier, got {attribute!r}")
    if keyword.iskeyword(attribute):
        raise ConfigurationError(f"Enum attribute {attribute!r} is a Python keyword")

    opts = parse_options(options)
    pairs = _normalize_values(attribute, values)

    column = opts.column or f"{attribute}_cd"
    if column == attribute:
        raise ConfigurationError(
            f"Enum '{attribute}' cannot be stored in a column of the same name"
        )

    if opts.prefix is True:
        prefix = attribute
    elif isinstance(opts.prefix, str):
        prefix = opts.prefix
    else:
        prefix = None

    return EnumDefinition(
        attribute=attribute,
        column=column,
        pairs=pairs,
        keys=_build_keys(attribute, pairs),
        prefix=prefix,
        shortcuts=not opts.slim,
        whiny=opts.whiny,
        upcase=opts.upcase,
    )


def parse_options(options: Mapping[str, Any]) -> EnumOptions:
    """Validate declaration options.

    Raises:
        ConfigurationError: If an option is unknown or has the wrong type.
    """
    try:
        return EnumOptions.model_validate(dict(options))
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid enum options: {len(e.errors())} error(s)", convert_errors(e)
        ) from e


def convert_errors(error: ValidationError) -> list[dict]:
    """Flatten a pydantic ValidationError into loc/msg/type dicts."""
    return [
        {
            "loc": ".".join(str(x) for x in err["loc"]),
            "msg": err["msg"],
            "type": err["type"],
        }
        for err in error.errors()
    ]


def _normalize_values(attribute: str, values: Any) -> tuple[tuple[str, int], ...]:
    """Turn a value specification into ordered (name, code) pairs."""
    if isinstance(values, type) and issubclass(values, Enum):
        items = [(member.name, member.value) for member in values]
    elif isinstance(values, Mapping):
        items = list(values.items())
    elif isinstance(values, Sequence) and not isinstance(values, (str, bytes)):
        items = [(name, index) for index, name in enumerate(values)]
    else:
        raise ConfigurationError(
            f"Enum '{attribute}' values must be a sequence, mapping or Enum class, "
            f"got {type(values).__name__}"
        )

    if not items:
        raise ConfigurationError(f"Enum '{attribute}' has no values")

    pairs: list[tuple[str, int]] = []
    seen_names: set[str] = set()
    seen_codes: dict[int, str] = {}

    for name, raw_code in items:
        if isinstance(name, Enum):
            name = name.value
        if not _is_identifier(name):
            raise ConfigurationError(
                f"Enum '{attribute}' value name must be an identifier, got {name!r}"
            )
        if keyword.iskeyword(name):
            raise ConfigurationError(
                f"Enum '{attribute}' value name {name!r} is a Python keyword"
            )
        if name.startswith("_") or name in _RESERVED_NAMES:
            raise ConfigurationError(
                f"Enum '{attribute}' value name {name!r} is reserved"
            )
        if name in seen_names:
            raise ConfigurationError(f"Enum '{attribute}' has duplicate name '{name}'")

        code = as_code(raw_code)
        if code is None or code < 0:
            raise ConfigurationError(
                f"Enum '{attribute}' code for '{name}' must be a non-negative "
                f"integer, got {raw_code!r}"
            )
        if code in seen_codes:
            raise ConfigurationError(
                f"Enum '{attribute}' maps both '{seen_codes[code]}' and '{name}' to {code}"
            )

        seen_names.add(name)
        seen_codes[code] = name
        pairs.append((name, code))

    return tuple(pairs)


def _is_identifier(name: Any) -> bool:
    return isinstance(name, str) and name.isidentifier()


def _build_keys(attribute: str, pairs: tuple[tuple[str, int], ...]) -> type[EnumKey]:
    """Create the key Enum for a set of names."""
    class_name = "".join(part.capitalize() for part in attribute.split("_")) or attribute
    try:
        return EnumKey(class_name, [(name, name) for name, _ in pairs])
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Enum '{attribute}' has an unusable value name: {e}") from e
