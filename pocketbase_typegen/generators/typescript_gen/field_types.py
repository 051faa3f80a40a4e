"""Map PocketBase field types to TypeScript type expressions."""
from typing import Callable, Dict, Union
from pocketbase_typegen.core.errors import UnrecognizedFieldKind
from pocketbase_typegen.schemas.collections import FieldSchema
from pocketbase_typegen.generators.typescript_gen.constants import (
    DATE_STRING_TYPE_NAME,
    RECORD_ID_STRING_NAME,
)
from pocketbase_typegen.generators.typescript_gen.generics import field_name_to_generic
from pocketbase_typegen.generators.typescript_gen.utils import get_option_enum_name

TypeMapper = Callable[[FieldSchema, str], str]


def _is_multiple(field: FieldSchema) -> bool:
    max_select = field.options.max_select
    return max_select is not None and max_select > 1


def _select_type(field: FieldSchema, collection_name: str) -> str:
    # Without declared values the allowed strings are unknown here
    value_type = (
        get_option_enum_name(collection_name, field.name)
        if field.options.values
        else "string"
    )
    return f"{value_type}[]" if _is_multiple(field) else value_type


def _json_type(field: FieldSchema, collection_name: str) -> str:
    return f"null | {field_name_to_generic(field.name)}"


def _file_type(field: FieldSchema, collection_name: str) -> str:
    return "string[]" if _is_multiple(field) else "string"


def _relation_type(field: FieldSchema, collection_name: str) -> str:
    if field.options.max_select == 1:
        return RECORD_ID_STRING_NAME
    return f"{RECORD_ID_STRING_NAME}[]"


def _user_type(field: FieldSchema, collection_name: str) -> str:
    # DEPRECATED: PocketBase v0.8 has no dedicated user relation
    return f"{RECORD_ID_STRING_NAME}[]" if _is_multiple(field) else RECORD_ID_STRING_NAME


PB_SCHEMA_TYPESCRIPT_MAP: Dict[str, Union[str, TypeMapper]] = {
    "text": "string",
    "number": "number",
    "bool": "boolean",
    "email": "string",
    "url": "string",
    "date": DATE_STRING_TYPE_NAME,
    "select": _select_type,
    "json": _json_type,
    "file": _file_type,
    "relation": _relation_type,
    "user": _user_type,
}


def map_field_type(field: FieldSchema, collection_name: str) -> str:
    """Return the TypeScript type expression for one field.

    Raises:
        UnrecognizedFieldKind: the field type is not a known PocketBase type
    """
    if field.type not in PB_SCHEMA_TYPESCRIPT_MAP:
        raise UnrecognizedFieldKind(field.type)
    type_or_func = PB_SCHEMA_TYPESCRIPT_MAP[field.type]
    if callable(type_or_func):
        return type_or_func(field, collection_name)
    return type_or_func
