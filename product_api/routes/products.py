"""
Product Management API — Product Routes
=========================================

Public: no bearer token is required. PUT takes the full product body.
"""

from typing import Any, List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from product_api.dependencies import get_product_service
from product_api.models.product import Product
from product_api.responses import to_response
from product_api.routes import json_body, json_payload
from product_api.schemas.common import ErrorResponse, MessageResponse
from product_api.schemas.product import ProductCreate
from product_api.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Product"])


@router.post(
    "",
    status_code=201,
    response_model=Product,
    responses={400: {"description": "Validation or database error", "model": ErrorResponse}},
    summary="Create a new product",
    openapi_extra=json_body(ProductCreate),
)
async def create_product(
    payload: Any = Depends(json_payload),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    return to_response(await service.create(payload), status_code=201)


@router.get(
    "",
    response_model=List[Product],
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="Get all products",
)
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    return to_response(await service.list())


@router.get(
    "/{product_id}",
    response_model=Product,
    responses={
        404: {"description": "Product not found", "model": ErrorResponse},
        500: {"description": "Lookup failed", "model": ErrorResponse},
    },
    summary="Get a product by ID",
)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    return to_response(await service.get(product_id))


@router.put(
    "/{product_id}",
    response_model=Product,
    responses={
        400: {"description": "Validation or database error", "model": ErrorResponse},
        404: {"description": "Product not found", "model": ErrorResponse},
    },
    summary="Update a product",
    openapi_extra=json_body(ProductCreate),
)
async def update_product(
    product_id: str,
    payload: Any = Depends(json_payload),
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    return to_response(await service.update(product_id, payload))


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    responses={
        404: {"description": "Product not found", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Delete a product",
)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> JSONResponse:
    return to_response(await service.delete(product_id))
