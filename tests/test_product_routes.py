"""
Product Management API — Product Endpoint Tests
=================================================

Product routes are public: no Authorization header anywhere in this module.
"""

import pytest
from bson import ObjectId


class TestProductEndpoints:

    @pytest.mark.asyncio
    async def test_create_returns_stored_product(self, test_client, product_payload):
        response = await test_client.post("/products", json=product_payload)

        assert response.status_code == 201
        body = response.json()
        assert ObjectId.is_valid(body["_id"])
        assert body["name"] == "Wireless Mouse"
        assert body["price"] == 24.99
        assert body["stockQuantity"] == 150
        assert body["createdDate"] == body["updatedDate"]

    @pytest.mark.asyncio
    async def test_crud_round_trip(self, test_client, product_payload):
        product_id = (await test_client.post("/products", json=product_payload)).json()["_id"]

        listed = await test_client.get("/products")
        assert listed.status_code == 200
        assert [p["_id"] for p in listed.json()] == [product_id]

        updated = await test_client.put(
            f"/products/{product_id}", json={**product_payload, "stockQuantity": 0}
        )
        assert updated.status_code == 200
        assert updated.json()["stockQuantity"] == 0

        deleted = await test_client.delete(f"/products/{product_id}")
        assert deleted.status_code == 200
        assert deleted.json() == {"message": "Product deleted successfully"}

        fetched = await test_client.get(f"/products/{product_id}")
        assert fetched.status_code == 404
        assert fetched.json() == {"message": "Product not found"}

    @pytest.mark.asyncio
    async def test_missing_fields(self, test_client):
        response = await test_client.post("/products", json={"name": "Mouse"})

        assert response.status_code == 400
        messages = response.json()["message"]
        assert "Price is required" in messages
        assert "Supplier ID is required" in messages
        assert "Product name is required" not in messages

    @pytest.mark.asyncio
    async def test_non_numeric_price(self, test_client, product_payload):
        response = await test_client.post("/products", json={**product_payload, "price": "free"})

        assert response.status_code == 400
        assert response.json() == {"message": ["Price must be a number"]}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("price", ["NaN", "inf", "Infinity"])
    async def test_non_finite_price_never_stored(self, test_client, database, product_payload, price):
        response = await test_client.post("/products", json={**product_payload, "price": price})

        assert response.status_code == 400
        assert response.json() == {"message": ["Price must be a number"]}
        assert await database["products"].count_documents({}) == 0
        assert (await test_client.get("/products")).status_code == 200

    @pytest.mark.asyncio
    async def test_boolean_numbers_rejected(self, test_client, database, product_payload):
        response = await test_client.post(
            "/products", json={**product_payload, "price": True, "stockQuantity": False}
        )

        assert response.status_code == 400
        assert response.json() == {
            "message": ["Price must be a number", "Stock quantity must be an integer"]
        }
        assert await database["products"].count_documents({}) == 0

    @pytest.mark.asyncio
    async def test_array_body_rejected(self, test_client):
        response = await test_client.post("/products", json=[1, 2, 3])

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_partial_update_rejected(self, test_client, product_payload):
        product_id = (await test_client.post("/products", json=product_payload)).json()["_id"]

        response = await test_client.put(f"/products/{product_id}", json={"price": 1})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_malformed_id_is_400(self, test_client, product_payload):
        response = await test_client.put("/products/xyz", json=product_payload)

        assert response.status_code == 400
        assert "xyz" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_delete_malformed_id_is_500(self, test_client):
        response = await test_client.delete("/products/xyz")

        assert response.status_code == 500

    @pytest.mark.asyncio
    async def test_delete_unknown_id(self, test_client):
        response = await test_client.delete(f"/products/{ObjectId()}")

        assert response.status_code == 404
