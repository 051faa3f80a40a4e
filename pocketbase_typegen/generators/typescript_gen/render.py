"""Rendering functions for per-collection TypeScript declarations."""
from typing import Dict, List, Sequence
from pocketbase_typegen.core.errors import UnresolvedRelationTarget
from pocketbase_typegen.schemas.collections import CollectionRecord, FieldSchema
from pocketbase_typegen.generators.typescript_gen.field_types import map_field_type
from pocketbase_typegen.generators.typescript_gen.generics import (
    get_generic_arg_string,
    get_generic_arg_string_with_default,
)
from pocketbase_typegen.generators.typescript_gen.utils import (
    get_option_enum_name,
    get_option_values,
    get_system_fields,
    sanitize_field_name,
    to_pascal_case,
    to_string_literal,
)


def render_collection_enum(collection_names: Sequence[str]) -> str:
    """Generate the ``Collections`` enum mapping PascalCase names to collection names."""
    lines = ["export enum Collections {"]
    for name in collection_names:
        lines.append(f"\t{to_pascal_case(name)} = {to_string_literal(name)},")
    lines.append("}")
    return "\n".join(lines)


def render_collection_records(collection_names: Sequence[str]) -> str:
    """Generate the lookup type from collection name to record type."""
    lines = ["export type CollectionRecords = {"]
    for name in collection_names:
        lines.append(f"\t{name}: {to_pascal_case(name)}Record")
    lines.append("}")
    return "\n".join(lines)


def render_select_options(record_name: str, schema: Sequence[FieldSchema]) -> str:
    """Generate one enum per select field that declares its values.

    Each enum is followed by a newline so the record type can be appended
    directly after the last one.
    """
    enums = []
    for field in schema:
        if field.type != "select":
            continue
        values = get_option_values(field)
        if not values:
            continue
        lines = [f"export enum {get_option_enum_name(record_name, field.name)} {{"]
        for value in values:
            literal = to_string_literal(value)
            lines.append(f"\t{literal} = {literal},")
        lines.append("}")
        enums.append("\n".join(lines) + "\n")
    return "\n".join(enums)


def render_type_field(collection_name: str, field: FieldSchema) -> str:
    type_string = map_field_type(field, collection_name)
    required = "" if field.required else "?"
    return f"\t{sanitize_field_name(field.name)}{required}: {type_string}"


def render_record_type(name: str, schema: Sequence[FieldSchema]) -> str:
    """Generate the select enums and the ``<Name>Record`` type for a collection."""
    select_option_enums = render_select_options(name, schema)
    type_name = to_pascal_case(name)
    generic_args = get_generic_arg_string_with_default(schema)

    lines = [f"{select_option_enums}export type {type_name}Record{generic_args} = {{"]
    for field in schema:
        lines.append(render_type_field(name, field))
    lines.append("}")
    return "\n".join(lines)


def render_expand_field(target: CollectionRecord, field: FieldSchema) -> str:
    """Generate one optional member of the ``expand`` block.

    A target without a schema has no response type of its own, so only its
    system fields are referenced.
    """
    if target.schema_ is None:
        response_name = get_system_fields(target.type)
    else:
        response_name = f"{to_pascal_case(target.name)}Response"
    if field.options.max_select == 1:
        type_string = response_name
    else:
        type_string = f"Array<{response_name}>"
    return f"\t\t{sanitize_field_name(field.name)}?: {type_string}"


def render_response_type(
    collection: CollectionRecord,
    collections_by_id: Dict[str, CollectionRecord],
) -> str:
    """Generate ``<Name>Response``: the record type plus system fields and expand.

    Relation targets are looked up in ``collections_by_id``; only the first
    level of relations is inlined.

    Raises:
        UnresolvedRelationTarget: a relation points at a collection id that is
            not in ``collections_by_id``
    """
    schema = collection.schema_ or []
    pascal_name = to_pascal_case(collection.name)
    generic_args_with_defaults = get_generic_arg_string_with_default(schema)
    generic_args = get_generic_arg_string(schema)

    expand_fields: List[str] = []
    for field in schema:
        if field.type != "relation":
            continue
        target = collections_by_id.get(field.options.collection_id)
        if target is None:
            raise UnresolvedRelationTarget(field.options.collection_id)
        expand_fields.append(render_expand_field(target, field))

    parts = [
        f"{pascal_name}Record{generic_args}",
        get_system_fields(collection.type),
    ]
    if expand_fields:
        parts.append("{\n\texpand?: {\n" + "\n".join(expand_fields) + "\n\t}\n}")

    return f"export type {pascal_name}Response{generic_args_with_defaults} = " + " & ".join(parts)
