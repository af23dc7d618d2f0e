# Routes package init
"""
Product Management API — Route Table
======================================

Route Inventory:
    - categories.py:  POST/GET /categories, GET/PUT/DELETE /categories/{id}  (bearer auth)
    - products.py:    POST/GET /products,   GET/PUT/DELETE /products/{id}    (public)
    - auth.py:        POST /auth/register, POST /auth/login
    - health.py:      GET /health

Routes are thin: read the path and raw JSON body, call the controller, and
hand its Result to `product_api.responses.to_response`. Bodies are taken as
raw JSON (not a pydantic parameter) so validation failures come back as our
400 message list; `json_body()` still documents the schema in OpenAPI.

The body is read by the `json_payload` dependency, which FastAPI resolves
after router-level dependencies. On guarded routers a missing token is
therefore a 401 even when the body is not valid JSON.
"""

import json
from typing import Any, Dict, Type

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel


async def json_payload(request: Request) -> Any:
    """Parsed JSON body, or None when the body is empty."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise RequestValidationError(
            [
                {
                    "type": "json_invalid",
                    "loc": ("body", getattr(exc, "pos", 0)),
                    "msg": "JSON decode error",
                    "input": {},
                    "ctx": {"error": str(exc)},
                }
            ]
        )


def json_body(schema: Type[BaseModel]) -> Dict[str, Any]:
    """`openapi_extra` documenting a raw JSON body with `schema`."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }
