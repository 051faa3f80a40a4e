"""Tests for the typegen HTTP API."""
from fastapi.testclient import TestClient
from pocketbase_typegen.main import app

client = TestClient(app)


def test_health():
    response = client.get("/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_typegen_returns_typescript(sample_schema):
    """Test that posting collections returns the generated module as text."""
    response = client.post("/v1/typegen", json={"collections": sample_schema})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "export type PostsResponse<Tmetadata = unknown>" in response.text
    assert response.text.endswith("\tusers: UsersRecord\n}")


def test_typegen_rejects_unknown_field_kind(sample_schema):
    """Test that generation errors are returned as 422 with the error message."""
    sample_schema[1]["schema"].append({"name": "odd", "type": "unknown_kind"})

    response = client.post("/v1/typegen", json={"collections": sample_schema})

    assert response.status_code == 422
    assert response.json()["detail"] == "unknown type unknown_kind found in schema"


def test_typegen_rejects_malformed_body():
    response = client.post("/v1/typegen", json={"collections": [{"id": "no-name"}]})
    assert response.status_code == 422
