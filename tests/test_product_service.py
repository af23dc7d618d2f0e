"""
Product Management API — Product Controller Unit Tests
========================================================

What we test:
    ✅ Timestamps set on create and left alone on update
    ✅ Updates require the full body
    ✅ categoryId is stored without checking the categories collection
    ✅ Store failures on writes map to 400
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import WriteError

from product_api.exceptions import PersistenceError, ValidationError
from product_api.results import Err, Ok
from product_api.services.product_service import ProductService


class TestProductServiceCreate:

    @pytest.mark.asyncio
    async def test_create_sets_timestamps(self, database, product_payload):
        result = await ProductService(database).create(product_payload)

        assert isinstance(result, Ok)
        product = result.value
        assert product.createdDate == product.updatedDate
        assert product.createdDate.tzinfo is not None

    @pytest.mark.asyncio
    async def test_category_reference_is_not_enforced(self, database, product_payload):
        assert await database["categories"].count_documents({}) == 0

        result = await ProductService(database).create({**product_payload, "categoryId": "no-such-category"})

        assert isinstance(result, Ok)
        assert result.value.categoryId == "no-such-category"

    @pytest.mark.asyncio
    async def test_insert_failure_is_400(self, product_payload):
        collection = MagicMock()
        collection.insert_one = AsyncMock(side_effect=WriteError("document failed validation"))
        database = MagicMock()
        database.__getitem__.return_value = collection

        result = await ProductService(database).create(product_payload)

        assert isinstance(result, Err)
        assert isinstance(result.error, PersistenceError)
        assert result.error.status_code == 400
        assert result.error.message == "document failed validation"


class TestProductServiceUpdate:

    @pytest.mark.asyncio
    async def test_full_update(self, database, product_payload):
        service = ProductService(database)
        created = (await service.create(product_payload)).value

        result = await service.update(created.id, {**product_payload, "price": 19.99, "stockQuantity": 120})

        assert isinstance(result, Ok)
        assert result.value.price == 19.99
        assert result.value.stockQuantity == 120

    @pytest.mark.asyncio
    async def test_update_does_not_touch_timestamps(self, database, product_payload):
        service = ProductService(database)
        created = (await service.create(product_payload)).value
        before = (await service.get(created.id)).value

        await service.update(created.id, {**product_payload, "name": "Silent Mouse"})
        after = (await service.get(created.id)).value

        assert after.name == "Silent Mouse"
        assert after.createdDate == before.createdDate
        assert after.updatedDate == before.updatedDate

    @pytest.mark.asyncio
    async def test_partial_update_is_rejected(self, database, product_payload):
        service = ProductService(database)
        created = (await service.create(product_payload)).value

        result = await service.update(created.id, {"price": 5})

        assert isinstance(result, Err)
        assert isinstance(result.error, ValidationError)
        assert "Product name is required" in result.error.detail

    @pytest.mark.asyncio
    async def test_delete_message(self, database, product_payload):
        service = ProductService(database)
        created = (await service.create(product_payload)).value

        assert await service.delete(created.id) == Ok("Product deleted successfully")
        assert (await service.get(str(ObjectId()))).error.status_code == 404
