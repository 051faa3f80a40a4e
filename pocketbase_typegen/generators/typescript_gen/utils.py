"""Naming helpers for TypeScript generation."""
import json
import re
from typing import List
from pocketbase_typegen.generators.typescript_gen.constants import (
    AUTH_SYSTEM_FIELDS_NAME,
    BASE_SYSTEM_FIELDS_NAME,
)
from pocketbase_typegen.schemas.collections import FieldSchema

_WORD_RE = re.compile(r"[^\W_]+")
_INVALID_IDENTIFIER_CHAR_RE = re.compile(r"[^\w$]")


def to_pascal_case(name: str) -> str:
    """Convert snake_case, kebab-case or spaced names to PascalCase.

    Names made only of letters and digits keep their inner casing, so
    ``myPosts`` becomes ``MyPosts`` rather than ``Myposts``.
    """
    if name.isalnum():
        return name[:1].upper() + name[1:]
    return "".join(
        word[:1].upper() + word[1:].lower() for word in _WORD_RE.findall(name)
    )


def sanitize_field_name(name: str) -> str:
    """Quote field names that start with a digit so they stay valid keys."""
    if name[:1].isdigit():
        return f'"{name}"'
    return name


def to_identifier(name: str) -> str:
    """Replace characters that cannot appear in a TypeScript identifier."""
    return _INVALID_IDENTIFIER_CHAR_RE.sub("_", name)


def to_string_literal(value: str) -> str:
    """Quote a value as a TypeScript string literal, escaping quotes and backslashes."""
    return json.dumps(value, ensure_ascii=False)


def get_system_fields(collection_type: str) -> str:
    """Get the system fields type name for a collection type."""
    if collection_type == "auth":
        return AUTH_SYSTEM_FIELDS_NAME
    return BASE_SYSTEM_FIELDS_NAME


def get_option_enum_name(record_name: str, field_name: str) -> str:
    return f"{to_pascal_case(record_name)}{to_pascal_case(field_name)}Options"


def get_option_values(field: FieldSchema) -> List[str]:
    """Declared select values, first occurrence of each, in declared order."""
    values = field.options.values
    if not values:
        return []
    return list(dict.fromkeys(values))
