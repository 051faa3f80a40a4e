"""Tests for loading collections from JSON, SQLite and a PocketBase server."""
import json
import tempfile
from pathlib import Path
import httpx
import pytest
from sqlalchemy import create_engine, text
from pocketbase_typegen.core.errors import SchemaSourceError
from pocketbase_typegen.sources import from_database, from_json, from_url


def test_from_json(sample_schema):
    """Test that an exported schema file is parsed into collections."""
    with tempfile.TemporaryDirectory() as temp_dir:
        json_path = Path(temp_dir) / "pb_schema.json"
        json_path.write_text(json.dumps(sample_schema, indent=2), encoding="utf-8")

        collections = from_json(json_path)

    assert [c.name for c in collections] == ["comments", "posts", "users"]
    comments = collections[0]
    assert comments.create_rule == "@request.auth.id != ''", "Rules are passed through untouched"
    assert comments.schema_[1].options.collection_id == "posts_id"
    assert comments.schema_[1].options.max_select == 1
    assert collections[2].options["minPasswordLength"] == 8


def test_from_json_errors():
    """Test that missing and malformed files raise SchemaSourceError."""
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)

        with pytest.raises(SchemaSourceError):
            from_json(temp_path / "missing.json")

        broken = temp_path / "broken.json"
        broken.write_text("{not json", encoding="utf-8")
        with pytest.raises(SchemaSourceError):
            from_json(broken)

        not_a_list = temp_path / "object.json"
        not_a_list.write_text('{"items": []}', encoding="utf-8")
        with pytest.raises(SchemaSourceError):
            from_json(not_a_list)

        missing_name = temp_path / "missing_name.json"
        missing_name.write_text('[{"id": "x"}]', encoding="utf-8")
        with pytest.raises(SchemaSourceError):
            from_json(missing_name)


def test_from_database(sample_schema):
    """Test that the _collections table is read and its JSON columns decoded."""
    with tempfile.TemporaryDirectory() as temp_dir:
        db_path = Path(temp_dir) / "data.db"
        engine = create_engine(f"sqlite:///{db_path}")
        with engine.begin() as conn:
            conn.execute(text(
                "CREATE TABLE _collections ("
                "id TEXT PRIMARY KEY, system BOOLEAN, type TEXT, name TEXT, schema TEXT,"
                "listRule TEXT, viewRule TEXT, createRule TEXT, updateRule TEXT, deleteRule TEXT,"
                "options TEXT, created TEXT, updated TEXT)"
            ))
            for collection in sample_schema:
                conn.execute(
                    text(
                        "INSERT INTO _collections VALUES (:id, :system, :type, :name, :schema,"
                        " :listRule, :viewRule, :createRule, :updateRule, :deleteRule, :options,"
                        " '2023-01-01 00:00:00.000Z', '2023-01-01 00:00:00.000Z')"
                    ),
                    {
                        **collection,
                        "schema": json.dumps(collection["schema"]),
                        "options": json.dumps(collection["options"]),
                    },
                )
        engine.dispose()

        collections = from_database(db_path)

    by_name = {c.name: c for c in collections}
    assert set(by_name) == {"comments", "posts", "users"}
    assert by_name["users"].type == "auth"
    assert by_name["posts"].schema_[1].options.values == ["a", "b"]
    assert by_name["users"].options["allowEmailAuth"] is True


def test_from_database_errors():
    """Test that a missing file or missing table raises SchemaSourceError."""
    with tempfile.TemporaryDirectory() as temp_dir:
        with pytest.raises(SchemaSourceError):
            from_database(Path(temp_dir) / "missing.db")

        empty_db = Path(temp_dir) / "empty.db"
        engine = create_engine(f"sqlite:///{empty_db}")
        with engine.begin() as conn:
            conn.execute(text("CREATE TABLE other (id TEXT)"))
        engine.dispose()

        with pytest.raises(SchemaSourceError):
            from_database(empty_db)


def _pocketbase_transport(sample_schema, seen):
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path == "/api/admins/auth-with-password":
            form = dict(pair.split("=") for pair in request.content.decode().split("&"))
            if form == {"identity": "admin%40example.com", "password": "secret"}:
                return httpx.Response(200, json={"token": "admin-token", "admin": {"id": "a1"}})
            return httpx.Response(400, json={"message": "Failed to authenticate."})
        if request.url.path == "/api/collections":
            if request.headers.get("Authorization") != "admin-token":
                return httpx.Response(401, json={"message": "Unauthorized"})
            return httpx.Response(200, json={"page": 1, "perPage": 200, "items": sample_schema})
        return httpx.Response(404)

    return httpx.MockTransport(handler)


def test_from_url(sample_schema):
    """Test that the admin token is used to fetch the collection list."""
    seen = []
    transport = _pocketbase_transport(sample_schema, seen)

    collections = from_url("http://pb.local/", "admin@example.com", "secret", transport=transport)

    assert [c.name for c in collections] == ["comments", "posts", "users"]
    assert seen[0].method == "POST"
    assert seen[1].method == "GET"
    assert seen[1].url.params["perPage"] == "200"


def test_from_url_bad_credentials(sample_schema):
    """Test that an authentication failure raises SchemaSourceError."""
    transport = _pocketbase_transport(sample_schema, [])

    with pytest.raises(SchemaSourceError) as exc_info:
        from_url("http://pb.local", "admin@example.com", "wrong", transport=transport)

    assert "400" in str(exc_info.value)


def test_from_url_non_object_payloads():
    """Test that list or scalar JSON bodies raise SchemaSourceError instead of crashing."""
    def auth_returns_list(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=["not", "a", "dict"])

    with pytest.raises(SchemaSourceError):
        from_url("http://pb.local", "a@b.c", "x", transport=httpx.MockTransport(auth_returns_list))

    def items_not_a_list(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/admins/auth-with-password":
            return httpx.Response(200, json={"token": "admin-token"})
        return httpx.Response(200, json={"items": "nope"})

    with pytest.raises(SchemaSourceError):
        from_url("http://pb.local", "a@b.c", "x", transport=httpx.MockTransport(items_not_a_list))

    def collections_scalar(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/admins/auth-with-password":
            return httpx.Response(200, json={"token": "admin-token"})
        return httpx.Response(200, json=42)

    with pytest.raises(SchemaSourceError):
        from_url("http://pb.local", "a@b.c", "x", transport=httpx.MockTransport(collections_scalar))
