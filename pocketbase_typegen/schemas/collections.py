"""Pydantic models for the PocketBase collection schema."""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any, List


class _SchemaModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class FieldOptions(_SchemaModel):
    # Every option is optional; which ones apply depends on the field type
    max_select: Optional[int] = Field(default=None, alias="maxSelect")
    min: Optional[Any] = None
    max: Optional[Any] = None
    pattern: Optional[str] = None
    values: Optional[List[str]] = None
    collection_id: Optional[str] = Field(default=None, alias="collectionId")
    cascade_delete: Optional[bool] = Field(default=None, alias="cascadeDelete")


class FieldSchema(_SchemaModel):
    id: str = ""
    name: str
    type: str
    system: bool = False
    required: bool = False
    unique: bool = False
    options: FieldOptions = Field(default_factory=FieldOptions)


class CollectionRecord(_SchemaModel):
    id: str = ""
    name: str
    type: str = "base"
    system: bool = False
    list_rule: Optional[str] = Field(default=None, alias="listRule")
    view_rule: Optional[str] = Field(default=None, alias="viewRule")
    create_rule: Optional[str] = Field(default=None, alias="createRule")
    update_rule: Optional[str] = Field(default=None, alias="updateRule")
    delete_rule: Optional[str] = Field(default=None, alias="deleteRule")
    schema_: Optional[List[FieldSchema]] = Field(default=None, alias="schema")
    options: Optional[Dict[str, Any]] = None


class TypegenRequest(BaseModel):
    collections: List[CollectionRecord]


def parse_collections(items: List[Dict[str, Any]]) -> List[CollectionRecord]:
    """Validate raw collection mappings into CollectionRecord models."""
    return [CollectionRecord.model_validate(item) for item in items]
