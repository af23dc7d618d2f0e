"""
Product Management API — Test Configuration (conftest.py)
===========================================================

What:  Shared pytest fixtures.
How:   An in-memory motor-compatible client (mongomock-motor) stands in for
       MongoDB, and the app is built with `create_app(settings, client)` so no
       real server or environment is needed.

Fixtures:
    settings       Settings with a known JWT secret, no .env file
    mongo_client   fresh in-memory client per test
    database       the app's database handle, unique indexes created
    test_client    httpx AsyncClient talking to the ASGI app
    make_token     builds signed tokens (optionally expired / wrongly signed)
    auth_headers   Authorization header with a valid token
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from product_api.config import Settings
from product_api.database import ensure_indexes, get_mongo_database

TEST_SECRET = "test-secret-not-for-production-use"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        environment="development",
        mongo_scheme="mongodb",
        mongo_url="localhost:27017",
        mongo_collection="product-management-test",
        jwt_secret=TEST_SECRET,
        log_level="WARNING",
    )


@pytest.fixture
def mongo_client():
    return AsyncMongoMockClient()


@pytest_asyncio.fixture
async def database(mongo_client, settings):
    db = get_mongo_database(mongo_client, settings)
    await ensure_indexes(db)
    return db


@pytest_asyncio.fixture
async def test_client(settings, mongo_client, database):
    """
    HTTP client bound to a fresh app.

    ASGITransport does not run the lifespan, so the injected client is used
    as-is and no connection attempt is made.
    """
    from product_api.main import create_app

    app = create_app(settings, mongo_client=mongo_client)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def make_token():
    def _make(subject="tester", expires_in=timedelta(hours=1), secret=TEST_SECRET, **claims):
        now = datetime.now(timezone.utc)
        payload = {"sub": subject, "iat": now, "exp": now + expires_in, **claims}
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make


@pytest.fixture
def auth_headers(make_token):
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def category_payload():
    return {
        "categoryId": "cat1",
        "name": "Electronics",
        "description": "Products related to electronic devices.",
    }


@pytest.fixture
def product_payload():
    return {
        "name": "Wireless Mouse",
        "description": "2.4 GHz ergonomic mouse",
        "price": 24.99,
        "stockQuantity": 150,
        "categoryId": "cat1",
        "supplierId": "sup001",
    }
