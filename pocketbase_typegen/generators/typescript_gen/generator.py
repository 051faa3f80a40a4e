"""Assemble the TypeScript definitions module for a set of collections."""
import logging
from typing import Dict, List, Sequence
from pocketbase_typegen.schemas.collections import CollectionRecord
from pocketbase_typegen.generators.typescript_gen.constants import (
    ALIAS_TYPE_DEFINITIONS,
    AUTH_SYSTEM_FIELDS_DEFINITION,
    BASE_SYSTEM_FIELDS_DEFINITION,
    EXPORT_COMMENT,
    PART_SEPARATOR,
    RECORD_TYPE_COMMENT,
    RESPONSE_TYPE_COMMENT,
)
from pocketbase_typegen.generators.typescript_gen.render import (
    render_collection_enum,
    render_collection_records,
    render_record_type,
    render_response_type,
)

log = logging.getLogger(__name__)


def index_collections(collections: Sequence[CollectionRecord]) -> Dict[str, CollectionRecord]:
    """Build the id -> collection lookup used to resolve relation targets."""
    return {collection.id: collection for collection in collections}


def generate(collections: Sequence[CollectionRecord]) -> str:
    """
    Generate TypeScript definitions for all collections.

    Collections are emitted sorted by name. The input sequence is not modified.

    Args:
        collections: Collections as returned by one of the schema sources

    Returns:
        The complete TypeScript module as a single string

    Raises:
        UnrecognizedFieldKind: a field has a type with no TypeScript mapping
        UnresolvedRelationTarget: a relation points at an unknown collection id
    """
    sorted_collections = sorted(collections, key=lambda collection: collection.name)
    collections_by_id = index_collections(sorted_collections)

    collection_names: List[str] = []
    record_names: List[str] = []
    record_types: List[str] = []
    response_types: List[str] = [RESPONSE_TYPE_COMMENT]

    for collection in sorted_collections:
        collection_names.append(collection.name)
        if collection.schema_ is None:
            log.debug("Collection %s has no schema, skipping types", collection.name,
                      extra={"stage": "generate"})
            continue
        record_names.append(collection.name)
        record_types.append(render_record_type(collection.name, collection.schema_))
        response_types.append(render_response_type(collection, collections_by_id))

    file_parts = [
        EXPORT_COMMENT,
        render_collection_enum(collection_names),
        ALIAS_TYPE_DEFINITIONS,
        BASE_SYSTEM_FIELDS_DEFINITION,
        AUTH_SYSTEM_FIELDS_DEFINITION,
        RECORD_TYPE_COMMENT,
        *record_types,
        "\n".join(response_types),
        render_collection_records(record_names),
    ]

    log.info("Generated types for %d collections", len(record_types), extra={"stage": "generate"})
    return PART_SEPARATOR.join(file_parts)
