"""
Product Management API — Result → HTTP Translation
====================================================

What:  Turns controller `Result`s into JSON responses.
Why:   This is the only place application errors become status codes; the
       controllers below never see HTTP.
How:   `Ok` → the value serialized by alias (`_id`) at the success status.
       `Err` → `{"message": ...}` at the error's own status, logged at WARNING
       for 4xx and ERROR for 5xx with the request ID.
"""

import logging
from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from product_api.exceptions import AuthError, ProductManagementError
from product_api.middleware.request_id import request_id_var
from product_api.results import Err, Result

logger = logging.getLogger(__name__)


def error_response(error: ProductManagementError) -> JSONResponse:
    rid = request_id_var.get("")
    status_code = error.status_code
    if status_code >= 500:
        logger.error("[%s] %s: %s | Context: %s", rid, type(error).__name__, error.message, error.context)
    else:
        logger.warning("[%s] %s: %s", rid, type(error).__name__, error.message)

    headers: Optional[Dict[str, str]] = None
    if isinstance(error, AuthError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=status_code, content={"message": error.detail}, headers=headers)


def to_response(result: Result[Any, ProductManagementError], status_code: int = 200) -> JSONResponse:
    """
    Translate a controller result.

    Plain strings on success are wrapped as `{"message": value}`, which is how
    delete confirmations are returned.
    """
    if isinstance(result, Err):
        return error_response(result.error)

    value = result.value
    if isinstance(value, str):
        content: Any = {"message": value}
    else:
        content = jsonable_encoder(value, by_alias=True, exclude_none=True)
    return JSONResponse(status_code=status_code, content=content)
