"""Errors raised while loading a schema or generating type definitions."""


class TypegenError(Exception):
    """Base class for every failure that aborts a generation run."""


class UnrecognizedFieldKind(TypegenError):
    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"unknown type {kind} found in schema")


class UnresolvedRelationTarget(TypegenError):
    def __init__(self, collection_id: str | None):
        self.collection_id = collection_id
        super().__init__(f"could not find collection with id {collection_id}")


class SchemaSourceError(TypegenError):
    """A schema source could not produce a collection list."""


class MissingSchemaSource(TypegenError):
    def __init__(self):
        super().__init__("Missing schema path. Check options: pocketbase-typegen --help")
