"""
Product Management API — Access Log Middleware
================================================

What:  One access-log line per API request on the `product_api.access` logger.
Why:   Pairs with the request ID so a failing call can be traced through
       controller logs.

Logged:     method, path, status, duration, client IP, request ID, and the
            token subject on authenticated category calls
Not logged: request bodies (passwords arrive in /auth bodies), the
            Authorization header, health probes and the docs pages
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from product_api.middleware.request_id import request_id_var

logger = logging.getLogger("product_api.access")

QUIET_PREFIXES = ("/health", "/api/docs", "/api/redoc", "/api/openapi.json")


def level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path.startswith(QUIET_PREFIXES):
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        identity = getattr(request.state, "identity", None) or {}
        subject = identity.get("sub", "-")
        client_ip = request.client.host if request.client else "unknown"

        logger.log(
            level_for(response.status_code),
            "%s %s → %d in %.1fms [%s] sub=%s ip=%s",
            request.method,
            path,
            response.status_code,
            elapsed_ms,
            request_id_var.get(""),
            subject,
            client_ip,
        )
        return response
