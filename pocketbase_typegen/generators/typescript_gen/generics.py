"""Generic type parameters for json fields, whose content shape is unknown."""
from typing import List, Sequence
from pocketbase_typegen.schemas.collections import FieldSchema
from pocketbase_typegen.generators.typescript_gen.utils import to_identifier


def field_name_to_generic(name: str) -> str:
    return f"T{to_identifier(name)}"


def get_generic_arg_list(schema: Sequence[FieldSchema]) -> List[str]:
    """One parameter per json field, in schema order."""
    return [
        field_name_to_generic(field.name)
        for field in schema
        if field.type == "json"
    ]


def get_generic_arg_string_with_default(schema: Sequence[FieldSchema]) -> str:
    """Declaration-site list, e.g. ``<Tdata = unknown>``; empty without json fields."""
    arg_list = get_generic_arg_list(schema)
    if not arg_list:
        return ""
    return "<" + ", ".join(f"{name} = unknown" for name in arg_list) + ">"


def get_generic_arg_string(schema: Sequence[FieldSchema]) -> str:
    """Reference-site list, e.g. ``<Tdata>``; empty without json fields."""
    arg_list = get_generic_arg_list(schema)
    if not arg_list:
        return ""
    return "<" + ", ".join(arg_list) + ">"
