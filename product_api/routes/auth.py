"""
Product Management API — Auth Routes
======================================

POST /auth/register stores a user; POST /auth/login exchanges email and
password for a bearer token accepted by the category routes.
"""

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from product_api.dependencies import get_auth_service
from product_api.models.user import User
from product_api.responses import to_response
from product_api.routes import json_body, json_payload
from product_api.schemas.auth import Credentials, TokenResponse
from product_api.schemas.common import ErrorResponse
from product_api.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/register",
    status_code=201,
    response_model=User,
    responses={400: {"description": "Missing field or email already registered", "model": ErrorResponse}},
    summary="Register a user",
    openapi_extra=json_body(Credentials),
)
async def register(
    payload: Any = Depends(json_payload),
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    return to_response(await service.register(payload), status_code=201)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"description": "Invalid email or password", "model": ErrorResponse}},
    summary="Obtain a bearer token",
    openapi_extra=json_body(Credentials),
)
async def login(
    payload: Any = Depends(json_payload),
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    return to_response(await service.login(payload))
