"""Accessor generation for enum attributes."""

from .generator import EnumAttribute, assign, check_generated_names, code_of, install
from .naming import GeneratedNames, generated_names, pluralize
from .storage import FieldStorage, read_field, write_field

__all__ = [
    "EnumAttribute",
    "FieldStorage",
    "GeneratedNames",
    "assign",
    "check_generated_names",
    "code_of",
    "generated_names",
    "install",
    "pluralize",
    "read_field",
    "write_field",
]
