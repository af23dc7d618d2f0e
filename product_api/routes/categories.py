"""
Product Management API — Category Routes
==========================================

Every route here requires `Authorization: Bearer <token>`; the guard runs as
a router dependency, before the handler and before any database call.
"""

from typing import Any, List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from product_api.dependencies import get_category_service
from product_api.middleware.auth import require_auth
from product_api.models.category import Category
from product_api.responses import to_response
from product_api.routes import json_body, json_payload
from product_api.schemas.category import CategoryCreate, CategoryUpdate
from product_api.schemas.common import ErrorResponse, MessageResponse
from product_api.services.category_service import CategoryService

router = APIRouter(
    prefix="/categories",
    tags=["Category"],
    dependencies=[Depends(require_auth)],
    responses={401: {"description": "Missing or invalid bearer token", "model": ErrorResponse}},
)


@router.post(
    "",
    status_code=201,
    response_model=Category,
    responses={400: {"description": "Validation error or duplicate categoryId", "model": ErrorResponse}},
    summary="Create a new category",
    openapi_extra=json_body(CategoryCreate),
)
async def create_category(
    payload: Any = Depends(json_payload),
    service: CategoryService = Depends(get_category_service),
) -> JSONResponse:
    return to_response(await service.create(payload), status_code=201)


@router.get(
    "",
    response_model=List[Category],
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="Get all categories",
    description="Returns every category. No pagination is applied.",
)
async def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> JSONResponse:
    return to_response(await service.list())


@router.get(
    "/{category_id}",
    response_model=Category,
    responses={
        404: {"description": "Category not found", "model": ErrorResponse},
        500: {"description": "Lookup failed (including a malformed id)", "model": ErrorResponse},
    },
    summary="Get category by ID",
)
async def get_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service),
) -> JSONResponse:
    return to_response(await service.get(category_id))


@router.put(
    "/{category_id}",
    response_model=Category,
    responses={
        400: {"description": "Validation or database error", "model": ErrorResponse},
        404: {"description": "Category not found", "model": ErrorResponse},
    },
    summary="Update category",
    description="Replaces the supplied fields; omitted fields keep their values.",
    openapi_extra=json_body(CategoryUpdate),
)
async def update_category(
    category_id: str,
    payload: Any = Depends(json_payload),
    service: CategoryService = Depends(get_category_service),
) -> JSONResponse:
    return to_response(await service.update(category_id, payload))


@router.delete(
    "/{category_id}",
    response_model=MessageResponse,
    responses={
        404: {"description": "Category not found", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Delete category",
)
async def delete_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service),
) -> JSONResponse:
    return to_response(await service.delete(category_id))
