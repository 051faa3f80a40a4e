"""Load collections straight from a PocketBase SQLite database file."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List
from pydantic import ValidationError
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from pocketbase_typegen.core.errors import SchemaSourceError
from pocketbase_typegen.schemas.collections import CollectionRecord, parse_collections

log = logging.getLogger(__name__)

# Columns stored as JSON text in the _collections table
JSON_COLUMNS = ("schema", "options")


def _decode_row(row: Dict[str, Any]) -> Dict[str, Any]:
    collection = dict(row)
    for column in JSON_COLUMNS:
        value = collection.get(column)
        if isinstance(value, (str, bytes)):
            collection[column] = json.loads(value)
    return collection


def from_database(db_path: str | Path) -> List[CollectionRecord]:
    path = Path(db_path)
    if not path.is_file():
        raise SchemaSourceError(f"database file {path} does not exist")

    log.info("Reading schema from database %s", path, extra={"source": "db", "stage": "load"})
    engine = create_engine(f"sqlite:///{path}")
    try:
        with engine.connect() as conn:
            rows = conn.execute(text("SELECT * FROM _collections")).mappings().all()
    except SQLAlchemyError as e:
        raise SchemaSourceError(f"could not read _collections from {path}: {e}") from e
    finally:
        engine.dispose()

    try:
        return parse_collections([_decode_row(row) for row in rows])
    except (ValueError, ValidationError) as e:
        raise SchemaSourceError(f"invalid collection row in {path}: {e}") from e
