"""Load collections from an exported PocketBase schema JSON file."""
import json
import logging
from pathlib import Path
from typing import List
from pydantic import ValidationError
from pocketbase_typegen.core.errors import SchemaSourceError
from pocketbase_typegen.schemas.collections import CollectionRecord, parse_collections

log = logging.getLogger(__name__)


def from_json(path: str | Path) -> List[CollectionRecord]:
    json_path = Path(path)
    log.info("Reading schema from %s", json_path, extra={"source": "json", "stage": "load"})
    try:
        with open(json_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise SchemaSourceError(f"could not read schema file {json_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SchemaSourceError(f"schema file {json_path} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise SchemaSourceError(f"schema file {json_path} must contain a list of collections")
    try:
        return parse_collections(data)
    except ValidationError as e:
        raise SchemaSourceError(f"invalid collection in {json_path}: {e}") from e
