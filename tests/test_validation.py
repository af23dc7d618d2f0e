"""
Product Management API — Validation Unit Tests
================================================

What:  Tests for `validate()` and the per-schema message tables.
Why:   The 400 body is the client's only guide to fixing a payload; its
       messages are part of the API contract.

What we test:
    ✅ Valid payloads come back as Ok with coerced values
    ✅ Every violation is reported, not just the first
    ✅ Custom messages for required / length rules
    ✅ Fallback messages for types without an override
    ✅ Non-object bodies
"""

import pytest

from product_api.exceptions import ValidationError
from product_api.results import Err, Ok
from product_api.schemas.category import CategoryCreate, CategoryUpdate
from product_api.schemas.product import ProductCreate
from product_api.validation import validate


class TestCategoryCreateValidation:

    def test_valid_payload(self, category_payload):
        result = validate(CategoryCreate, category_payload)

        assert isinstance(result, Ok)
        assert result.value.categoryId == "cat1"
        assert result.value.name == "Electronics"

    def test_description_is_optional(self):
        result = validate(CategoryCreate, {"categoryId": "cat1", "name": "Electronics"})

        assert isinstance(result, Ok)
        assert result.value.description is None

    def test_missing_name_reports_required(self):
        result = validate(CategoryCreate, {"categoryId": "cat1"})

        assert isinstance(result, Err)
        assert isinstance(result.error, ValidationError)
        assert result.error.status_code == 400
        assert result.error.detail == ["Category name is required"]

    def test_collects_all_violations(self):
        result = validate(CategoryCreate, {"description": "x" * 501})

        assert isinstance(result, Err)
        assert result.error.detail == [
            "Category ID is required",
            "Category name is required",
            "Description cannot exceed 500 characters",
        ]

    def test_name_length_boundary(self):
        ok = validate(CategoryCreate, {"categoryId": "c", "name": "n" * 100})
        too_long = validate(CategoryCreate, {"categoryId": "c", "name": "n" * 101})

        assert isinstance(ok, Ok)
        assert isinstance(too_long, Err)
        assert too_long.error.detail == ["Category name cannot exceed 100 characters"]

    def test_empty_name_is_required(self):
        result = validate(CategoryCreate, {"categoryId": "c", "name": ""})

        assert isinstance(result, Err)
        assert result.error.detail == ["Category name is required"]

    def test_non_string_name_uses_fallback(self):
        result = validate(CategoryCreate, {"categoryId": "c", "name": 42})

        assert isinstance(result, Err)
        assert result.error.detail == ['"name" must be a string']

    def test_unknown_fields_pass_through(self):
        result = validate(CategoryCreate, {"categoryId": "c", "name": "n", "color": "blue"})

        assert isinstance(result, Ok)
        assert result.value.model_dump()["color"] == "blue"

    def test_non_object_body(self):
        for payload in (None, [], "text"):
            result = validate(CategoryCreate, payload)
            assert isinstance(result, Err)
            assert result.error.detail == ['"value" must be of type object']


class TestCategoryUpdateValidation:

    def test_partial_payload(self):
        result = validate(CategoryUpdate, {"name": "Electronics & Gadgets"})

        assert isinstance(result, Ok)
        assert result.value.model_dump(exclude_unset=True) == {"name": "Electronics & Gadgets"}

    def test_empty_payload_is_valid(self):
        assert isinstance(validate(CategoryUpdate, {}), Ok)

    def test_length_rules_still_apply(self):
        result = validate(CategoryUpdate, {"name": "n" * 101, "description": "d" * 501})

        assert isinstance(result, Err)
        assert result.error.detail == [
            "Category name cannot exceed 100 characters",
            "Description cannot exceed 500 characters",
        ]


class TestProductValidation:

    def test_valid_payload(self, product_payload):
        result = validate(ProductCreate, product_payload)

        assert isinstance(result, Ok)
        assert result.value.price == 24.99
        assert result.value.stockQuantity == 150

    def test_numeric_strings_are_coerced(self, product_payload):
        result = validate(ProductCreate, {**product_payload, "price": "9.5", "stockQuantity": "3"})

        assert isinstance(result, Ok)
        assert result.value.price == 9.5
        assert result.value.stockQuantity == 3

    def test_missing_everything(self):
        result = validate(ProductCreate, {})

        assert isinstance(result, Err)
        assert result.error.detail == [
            "Product name is required",
            "Product description is required",
            "Price is required",
            "Stock quantity is required",
            "Category ID is required",
            "Supplier ID is required",
        ]

    def test_bad_numbers(self, product_payload):
        result = validate(ProductCreate, {**product_payload, "price": "cheap", "stockQuantity": 2.5})

        assert isinstance(result, Err)
        assert result.error.detail == [
            "Price must be a number",
            "Stock quantity must be an integer",
        ]

    def test_booleans_are_not_numbers(self, product_payload):
        result = validate(ProductCreate, {**product_payload, "price": True, "stockQuantity": False})

        assert isinstance(result, Err)
        assert result.error.detail == [
            "Price must be a number",
            "Stock quantity must be an integer",
        ]

    @pytest.mark.parametrize("price", ["NaN", "nan", "inf", "-Infinity", float("nan"), float("inf")])
    def test_non_finite_price_rejected(self, product_payload, price):
        result = validate(ProductCreate, {**product_payload, "price": price})

        assert isinstance(result, Err)
        assert result.error.detail == ["Price must be a number"]

    def test_unknown_fields_dropped(self, product_payload):
        result = validate(ProductCreate, {**product_payload, "discount": 10})

        assert isinstance(result, Ok)
        assert "discount" not in result.value.model_dump()
