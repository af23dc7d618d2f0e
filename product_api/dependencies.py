"""
Controller factories for FastAPI's dependency injection.

Each request gets a controller bound to the shared database handle from
`app.state`; nothing here is a module-level singleton.
"""

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from product_api.config import Settings
from product_api.database import get_database
from product_api.services.auth_service import AuthService
from product_api.services.category_service import CategoryService
from product_api.services.product_service import ProductService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_category_service(database: AsyncIOMotorDatabase = Depends(get_database)) -> CategoryService:
    return CategoryService(database)


def get_product_service(database: AsyncIOMotorDatabase = Depends(get_database)) -> ProductService:
    return ProductService(database)


def get_auth_service(
    database: AsyncIOMotorDatabase = Depends(get_database),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(database, settings)
