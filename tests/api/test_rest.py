"""
HTTP tests for the FastAPI application.
"""

import pytest

pytestmark = pytest.mark.integration


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_hello(client):
    resp = client.get("/api/plugin/hello")
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["message"] == "Hello World from REST API!"
    assert data["plugin"] == "hc-hello-world-plugin"
    assert data["timestamp"].endswith("Z")


def test_custom_hello_reads_json_body(client):
    resp = client.post("/api/plugin/custom-hello", json={"name": "Ada", "message": "Hi"})
    assert resp.status_code == 200, resp.text
    assert resp.json()["greeting"] == "Hi, Ada!"


def test_custom_hello_without_body(client):
    resp = client.post("/api/plugin/custom-hello")
    assert resp.status_code == 200, resp.text
    assert resp.json()["greeting"] == "Hello, World!"


def test_status(client):
    resp = client.get("/api/plugin/status")
    assert resp.status_code == 200
    assert resp.json()["status"] == "running"


def test_operations(client):
    resp = client.get("/api/plugin/operations")
    assert resp.status_code == 200
    data = resp.json()
    assert "getUsers" in data["queries"]
    assert "createUser" in data["mutations"]
    assert {"method": "GET", "path": "/status", "description": "Plugin status endpoint"} in data[
        "rest"
    ]


def test_call_function(client):
    resp = client.post("/api/plugin/functions/customFunction", json={})
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"result": "Custom function executed successfully"}


def test_call_unknown_function(client):
    resp = client.post("/api/plugin/functions/nope", json={})
    assert resp.status_code == 404
    assert "nope" in resp.json()["detail"]


def test_graphql_over_http_uses_host_headers(client):
    resp = client.post(
        "/graphql",
        json={"query": "query Greet { helloWorldQuery }", "operationName": "Greet"},
        headers={"X-Tenant-Id": "tenant-9", "X-User-Id": "user-3"},
    )

    assert resp.status_code == 200, resp.text
    text = resp.json()["data"]["helloWorldQuery"]
    assert "Tenant ID: tenant-9" in text
    assert "User ID: user-3" in text
    assert "Plugin ID: hc-hello-world-plugin" in text


def test_graphql_get_users_over_http(client):
    resp = client.post("/graphql", json={"query": "{ getUsers(active: false) { id name } }"})

    assert resp.status_code == 200, resp.text
    assert resp.json()["data"]["getUsers"] == [{"id": "2", "name": "Jane Smith"}]


def test_graphql_ide_served_to_browsers(client):
    resp = client.get("/graphql", headers={"Accept": "text/html"})

    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
