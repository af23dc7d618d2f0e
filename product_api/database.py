"""
Product Management API — Document Store Connection
====================================================

What:  motor (async MongoDB) client factory, startup connectivity check,
       index creation and the per-request database dependency.
Why:   All connection logic lives here; nothing else constructs a client.
How:   `create_mongo_client(settings)` builds one client at startup. It is
       stored on `app.state` and every request borrows the database handle
       through `get_database()`.
When:  Client created in the lifespan (or injected by tests); closed on shutdown.

Connection lifecycle:
    startup  → create_mongo_client → verify_connection (ping, retried)
             → ensure_indexes
    request  → get_database(request) → controllers
    shutdown → close_client
"""

import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    stop_after_attempt,
    wait_exponential,
)

from product_api.config import Settings
from product_api.models import category, user

logger = logging.getLogger(__name__)


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """
    Build the single MongoDB client for this process.

    motor connects lazily, so this never blocks or fails on an unreachable
    server; `verify_connection` is what surfaces connectivity problems.
    """
    return AsyncIOMotorClient(settings.mongo_connection, **settings.mongo_options)


def get_mongo_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    return client[settings.mongo_collection]


async def verify_connection(client: AsyncIOMotorClient, settings: Settings) -> str:
    """
    Ping the server, retrying with exponential backoff.

    Only the startup check retries; request handlers make a single attempt.

    Returns:
        The server version string.

    Raises:
        The last driver exception once attempts are exhausted.
    """
    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(settings.connect_max_attempts),
        wait=wait_exponential(min=settings.connect_min_wait, max=settings.connect_max_wait),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    ):
        with attempt:
            await client.admin.command("ping")
    info = await client.server_info()
    return info.get("version", "unknown")


async def ensure_indexes(database: AsyncIOMotorDatabase) -> None:
    """Create the unique indexes the document shapes rely on."""
    await database[category.COLLECTION].create_index("categoryId", unique=True)
    await database[user.COLLECTION].create_index("email", unique=True)


def close_client(client: AsyncIOMotorClient) -> None:
    client.close()


# ── Request Dependency ────────────────────────────────────────────────────

def get_database(request: Request) -> AsyncIOMotorDatabase:
    """
    FastAPI dependency returning the database handle for the current app.

    The client was created once at startup; handlers share it.
    """
    settings: Settings = request.app.state.settings
    return get_mongo_database(request.app.state.mongo_client, settings)
