"""
End-to-end tests against a deployed products API.

Set API_BASE_URL (for example the API Gateway stage URL) to run them.
"""

import os
import uuid

import httpx
import pytest

API_BASE_URL = os.environ.get("API_BASE_URL")

pytestmark = pytest.mark.skipif(not API_BASE_URL, reason="API_BASE_URL is not set")


@pytest.fixture
def client():
    with httpx.Client(base_url=API_BASE_URL.rstrip("/"), timeout=30.0) as http_client:
        yield http_client


@pytest.fixture
def created_product(client):
    response = client.post("/products", json={
        "name": f"e2e-{uuid.uuid4()}",
        "description": "Created by the e2e suite",
        "price": 9.99,
        "available": True,
    })
    assert response.status_code == 201
    product = response.json()
    yield product
    client.delete(f"/products/{product['productID']}")


@pytest.mark.e2e
class TestProductsApi:
    """Exercise the deployed API over HTTP."""

    def test_create_and_get(self, client, created_product):
        response = client.get(f"/products/{created_product['productID']}")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == created_product

    def test_update_keeps_path_id(self, client, created_product):
        product_id = created_product["productID"]
        response = client.put(f"/products/{product_id}", json={
            **created_product,
            "productID": "ignored",
            "price": 12.5,
        })

        assert response.status_code == 200
        assert response.json()["productID"] == product_id
        assert response.json()["price"] == 12.5

    def test_list_contains_product(self, client, created_product):
        response = client.get("/products")

        assert response.status_code == 200
        assert created_product["productID"] in {p["productID"] for p in response.json()}

    def test_delete_then_get(self, client, created_product):
        product_id = created_product["productID"]

        assert client.delete(f"/products/{product_id}").status_code == 204
        response = client.get(f"/products/{product_id}")

        assert response.status_code == 404
        assert response.json() == {"error": "not found"}

    def test_invalid_body(self, client):
        response = client.post("/products", json={"price": "not-a-number"})

        assert response.status_code == 400
        assert len(response.json()["errors"]) == 4
