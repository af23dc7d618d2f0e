"""
Product Management API — FastAPI Application Factory
======================================================

What:  Assembles the application: middleware, routers, exception handlers,
       API docs, and the MongoDB client lifecycle.
How:   `create_app(settings, mongo_client)` returns a configured FastAPI app.
       Both arguments are optional; tests pass an in-memory client.
Who:   uvicorn (`uvicorn product_api.main:app`, or the `product-api` script).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────────┐          │
    │  │  Req ID  │→│  Logging    │→│  CORS    │          │
    │  └──────────┘ └─────────────┘ └──────────┘          │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌───────────┐ ┌──────┐ ┌────────┐ │
    │  │ /categories* │ │ /products │ │/auth │ │/health │ │
    │  └──────────────┘ └───────────┘ └──────┘ └────────┘ │
    │     * bearer token required                         │
    │                                                     │
    │  Docs: /api/docs (Swagger UI), /api/redoc           │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Configure logging
    2. Check security-critical settings (fatal only in production)
    3. Create the Mongo client unless one was injected
    4. Ping (with retries) and create unique indexes
    Shutdown:
    1. Close the Mongo client
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorClient
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_api import __version__
from product_api.config import Settings
from product_api.database import (
    close_client,
    create_mongo_client,
    ensure_indexes,
    get_mongo_database,
    verify_connection,
)
from product_api.exceptions import ProductManagementError
from product_api.middleware.logging import RequestLoggingMiddleware
from product_api.middleware.request_id import RequestIDMiddleware, request_id_var
from product_api.responses import error_response
from product_api.routes import auth, categories, health, products
from product_api.validation import collect_messages

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(settings: Settings) -> None:
    """Configure root logging once, to stdout, at the configured level."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(settings)
    logger.info("=" * 60)
    logger.info("Product Management API starting up (%s)...", settings.environment)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))
        if settings.is_production:
            raise

    owns_client = app.state.mongo_client is None
    if owns_client:
        app.state.mongo_client = create_mongo_client(settings)

    client = app.state.mongo_client
    try:
        version = await verify_connection(client, settings)
        logger.info("Connected to Mongo: %s", version)
        await ensure_indexes(get_mongo_database(client, settings))
    except Exception as e:
        # Keep serving: requests will fail individually until the store is back
        logger.error("Unable to connect to Mongo: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.server_host, settings.server_port)
    logger.info("API docs: http://%s:%d/api/docs", settings.server_host, settings.server_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Product Management API shutting down...")
    if owns_client:
        close_client(client)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Global handlers for failures that never reach a controller:

        ProductManagementError  → its own status (AuthError from the guard)
        RequestValidationError  → 400, malformed JSON body
        HTTPException           → its status, e.g. unknown route 404
        Exception               → 500, details logged server-side only
    """

    @app.exception_handler(ProductManagementError)
    async def handle_app_error(request: Request, exc: ProductManagementError):
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        errors = list(exc.errors())
        if any(err.get("type") == "json_invalid" for err in errors):
            messages = ["Malformed JSON body"]
        else:
            # Drop the leading "body"/"path" segment so fields read as in controllers
            messages = collect_messages(
                [{**err, "loc": tuple(err.get("loc", ()))[1:]} for err in errors],
                {},
            )
        logger.warning("[%s] Malformed request: %s", rid, messages)
        return JSONResponse(status_code=400, content={"message": messages})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"message": "An unexpected error occurred"},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    mongo_client: Optional[AsyncIOMotorClient] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings:     Configuration; read from the environment when omitted.
        mongo_client: Pre-built client. When omitted the lifespan creates one
                      from `settings` and closes it on shutdown.
    """
    settings = settings or Settings()

    app = FastAPI(
        title="Product Management API",
        description="CRUD API for products and categories backed by MongoDB.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        swagger_ui_parameters={"persistAuthorization": True},
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.mongo_client = mongo_client

    # ── Middleware (last added runs first) ────────────────────────────────
    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[] if origins == ["*"] else origins,
        allow_origin_regex=".*" if origins == ["*"] else None,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # ── Routes ────────────────────────────────────────────────────────────
    app.include_router(categories.router, prefix=settings.api_prefix)
    app.include_router(products.router, prefix=settings.api_prefix)
    app.include_router(auth.router, prefix=settings.api_prefix)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Process entrypoint: serve `app` with uvicorn on the configured address."""
    import uvicorn

    settings: Settings = app.state.settings
    uvicorn.run(
        "product_api.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
