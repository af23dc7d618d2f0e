"""
Product Management API — Bearer Token Guard
=============================================

What:  FastAPI dependency that admits a request only with a valid bearer token.
Why:   Attached to protected routers so an unauthenticated call is rejected
       before the handler, and so before any database access.
How:   `HTTPBearer(auto_error=False)` extracts the token (and registers the
       `bearerAuth` scheme in the OpenAPI docs); `AuthService.verify_token`
       checks signature and expiry against the shared secret.

States:
    unauthenticated ──valid token──▶ authenticated (claims on request.state.identity)
    unauthenticated ──anything else──▶ 401, handler never runs
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from product_api.exceptions import AuthError
from product_api.middleware.request_id import request_id_var
from product_api.results import Err
from product_api.services.auth_service import AuthService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(
    scheme_name="bearerAuth",
    bearerFormat="JWT",
    auto_error=False,
)


async def require_auth(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Dict[str, Any]:
    """
    Verify the Authorization header and return the decoded claims.

    Raises:
        AuthError: missing header, wrong scheme, bad signature, expired token.
    """
    rid = request_id_var.get("")
    if credentials is None or not credentials.credentials:
        logger.warning("[%s] Rejected %s %s: missing bearer token", rid, request.method, request.url.path)
        raise AuthError(context={"reason": "missing_token"})

    verified = AuthService.verify_token(credentials.credentials, request.app.state.settings)
    if isinstance(verified, Err):
        logger.warning(
            "[%s] Rejected %s %s: %s",
            rid,
            request.method,
            request.url.path,
            verified.error.context.get("reason", "invalid_token"),
        )
        raise verified.error

    request.state.identity = verified.value
    return verified.value
