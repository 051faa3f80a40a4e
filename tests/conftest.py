"""Shared schema fixtures for the typegen tests."""
import pytest


@pytest.fixture
def sample_schema():
    """A small PocketBase schema export: posts, comments (relation to posts), users (auth)."""
    return [
        {
            "id": "comments_id",
            "name": "comments",
            "type": "base",
            "system": False,
            "listRule": "",
            "viewRule": "",
            "createRule": "@request.auth.id != ''",
            "updateRule": None,
            "deleteRule": None,
            "schema": [
                {"id": "f1", "name": "body", "type": "text", "system": False, "required": True, "unique": False, "options": {}},
                {"id": "f2", "name": "post", "type": "relation", "system": False, "required": True, "unique": False,
                 "options": {"maxSelect": 1, "collectionId": "posts_id", "cascadeDelete": True}},
                {"id": "f3", "name": "author", "type": "relation", "system": False, "required": False, "unique": False,
                 "options": {"maxSelect": None, "collectionId": "users_id", "cascadeDelete": False}},
            ],
            "options": {},
        },
        {
            "id": "posts_id",
            "name": "posts",
            "type": "base",
            "system": False,
            "listRule": None,
            "viewRule": None,
            "createRule": None,
            "updateRule": None,
            "deleteRule": None,
            "schema": [
                {"id": "f4", "name": "title", "type": "text", "system": False, "required": True, "unique": False, "options": {}},
                {"id": "f5", "name": "tags", "type": "select", "system": False, "required": False, "unique": False,
                 "options": {"maxSelect": 2, "values": ["a", "b"]}},
                {"id": "f6", "name": "metadata", "type": "json", "system": False, "required": False, "unique": False, "options": {}},
            ],
            "options": {},
        },
        {
            "id": "users_id",
            "name": "users",
            "type": "auth",
            "system": False,
            "listRule": "id = @request.auth.id",
            "viewRule": "id = @request.auth.id",
            "createRule": "",
            "updateRule": "id = @request.auth.id",
            "deleteRule": "id = @request.auth.id",
            "schema": [
                {"id": "f7", "name": "name", "type": "text", "system": False, "required": False, "unique": False, "options": {}},
                {"id": "f8", "name": "avatar", "type": "file", "system": False, "required": False, "unique": False,
                 "options": {"maxSelect": 1}},
            ],
            "options": {"allowEmailAuth": True, "minPasswordLength": 8, "requireEmail": False},
        },
    ]
