# tests/test_sdk.py
import pytest
from fastapi.testclient import TestClient
from catalog.main import create_app
from sdk.pycatalog import CatalogAPIError, CatalogClient


def make_client():
    return CatalogClient(base_url="http://testserver", session=TestClient(create_app()))


def test_health_and_list():
    c = make_client()
    assert c.health()["status"] == "healthy"
    assert len(c.list_products()) == 5


def test_crud_round_trip():
    c = make_client()
    created = c.create_product("Desk Lamp", 24.5, "Lighting")
    assert created["inStock"] is True
    assert c.get_product(created["id"]) == created

    updated = c.update_product(created["id"], "Desk Lamp", 19.0, "Lighting", False)
    assert updated == {"id": created["id"], "name": "Desk Lamp", "price": 19.0, "category": "Lighting", "inStock": False}

    assert c.delete_product(created["id"]) == {"message": "Product deleted successfully"}
    with pytest.raises(CatalogAPIError) as exc:
        c.get_product(created["id"])
    assert exc.value.status_code == 404
    assert exc.value.message == "Product not found"


def test_validation_error_surfaces_message():
    c = make_client()
    with pytest.raises(CatalogAPIError) as exc:
        c.create_product("Lamp", 0, "Lighting")
    assert exc.value.status_code == 400
    assert exc.value.message == "Name, price, and category are required"
