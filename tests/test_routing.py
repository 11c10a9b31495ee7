# tests/test_routing.py
import time

from fastapi.testclient import TestClient
from catalog.main import create_app

client = TestClient(create_app())

CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, POST, PUT, DELETE, OPTIONS",
    "access-control-allow-headers": "Content-Type, Authorization",
}


def assert_cors(r):
    for key, value in CORS.items():
        assert r.headers.get(key) == value


def test_health():
    before = int(time.time())
    r = client.get("/api/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "healthy"
    assert isinstance(body["timestamp"], int)
    assert before <= body["timestamp"] <= int(time.time()) + 1
    assert_cors(r)


def test_options_short_circuits_any_path():
    for path in ("/api/products", "/api/products/abc", "/api/health", "/nowhere/at/all"):
        r = client.options(path)
        assert r.status_code == 200
        assert r.content == b""
        assert_cors(r)


def test_unknown_route_is_404():
    r = client.get("/api/unknown")
    assert r.status_code == 404
    assert r.json() == {"error": "Endpoint not found"}
    assert_cors(r)


def test_unsupported_method_is_404():
    r = client.patch("/api/products", json={})
    assert r.status_code == 404
    assert r.json() == {"error": "Endpoint not found"}
    r = client.post("/api/health")
    assert r.status_code == 404
    assert r.json() == {"error": "Endpoint not found"}
    r = client.request("TRACE", "/api/products")
    assert r.status_code == 404
    assert r.json() == {"error": "Endpoint not found"}


def test_missing_id_is_400_not_404():
    for method in ("GET", "DELETE"):
        r = client.request(method, "/api/products/")
        assert r.status_code == 400
        assert r.json() == {"error": "Product ID is required"}
        assert_cors(r)
    r = client.put("/api/products/", json={"name": "Y", "price": 1, "category": "Z", "inStock": True})
    assert r.status_code == 400
    assert r.json() == {"error": "Product ID is required"}


def test_id_is_everything_after_prefix():
    r = client.get("/api/products/a/b")
    assert r.status_code == 404
    assert r.json() == {"error": "Product not found"}


def test_error_responses_carry_cors_headers():
    r = client.get("/api/products/missing")
    assert r.status_code == 404
    assert_cors(r)
    r = client.post("/api/products", json={"name": "", "price": 1, "category": "C"})
    assert r.status_code == 400
    assert_cors(r)


def test_docs_are_not_exposed():
    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").json() == {"error": "Endpoint not found"}
