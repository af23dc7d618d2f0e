"""
Product Management API — Auth Controller
==========================================

What:  User registration, login, and HS256 token issue / verification.
Why:   Category routes are gated by a bearer token signed with one shared
       secret; this is where such tokens come from and where they are checked.
How:   PyJWT signs and verifies; users live in the `users` collection.

Token claims:
    sub    user document id
    email  user email
    iat    issued-at
    exp    issued-at + JWT_EXPIRES_MINUTES

Known limitations, kept on purpose:
    - Passwords are stored and compared as plain text.
    - No refresh tokens and no revocation list; a token is valid until `exp`.
"""

import hmac
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List

import jwt
from motor.motor_asyncio import AsyncIOMotorDatabase

from product_api.config import Settings
from product_api.exceptions import AuthError, PersistenceError, ProductManagementError
from product_api.models import user
from product_api.models.user import User
from product_api.results import Err, Ok, Result
from product_api.schemas.auth import TokenResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def _missing_fields(payload: Any) -> List[str]:
    if not isinstance(payload, dict):
        return ["email", "password"]
    return [field for field in ("email", "password") if payload.get(field) in (None, "")]


def _passwords_match(stored: Any, supplied: Any) -> bool:
    if not isinstance(stored, str) or not isinstance(supplied, str):
        return False
    return hmac.compare_digest(stored.encode("utf-8"), supplied.encode("utf-8"))


class AuthService:
    """Issues and verifies bearer tokens; manages user documents."""

    def __init__(self, database: AsyncIOMotorDatabase, settings: Settings):
        self.database = database
        self.settings = settings

    @property
    def users(self):
        return self.database[user.COLLECTION]

    # ── Tokens ────────────────────────────────────────────────────────────

    def issue_token(self, account: User) -> TokenResponse:
        now = datetime.now(timezone.utc)
        lifetime = timedelta(minutes=self.settings.jwt_expires_minutes)
        claims = {
            "sub": account.id,
            "email": account.email,
            "iat": now,
            "exp": now + lifetime,
        }
        token = jwt.encode(claims, self.settings.jwt_secret, algorithm=self.settings.jwt_algorithm)
        return TokenResponse(token=token, expiresIn=int(lifetime.total_seconds()))

    @staticmethod
    def verify_token(token: str, settings: Settings) -> Result[Dict[str, Any], AuthError]:
        """
        Check signature and expiry of a bearer token.

        `exp` is enforced when present. An unset secret rejects every token
        rather than accepting tokens signed with an empty key.
        """
        if not settings.jwt_secret:
            logger.error("Token rejected: JWT_SECRET is not configured")
            return Err(AuthError(context={"reason": "secret_not_configured"}))
        try:
            claims = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        except jwt.ExpiredSignatureError:
            return Err(AuthError(context={"reason": "expired"}))
        except jwt.InvalidTokenError as exc:
            return Err(AuthError(context={"reason": type(exc).__name__}))
        return Ok(claims)

    # ── Users ─────────────────────────────────────────────────────────────

    async def register(self, payload: Any) -> Result[User, ProductManagementError]:
        """
        Store a new user.

        No schema validation: email and password are only checked for
        presence and string type, the way the store's field checks would.
        """
        missing = _missing_fields(payload)
        if missing:
            return Err(
                PersistenceError(
                    message="User validation failed: " + ", ".join(f"{f} is required" for f in missing),
                    write=True,
                )
            )
        wrong_type = [field for field in ("email", "password") if not isinstance(payload[field], str)]
        if wrong_type:
            return Err(
                PersistenceError(
                    message="User validation failed: " + ", ".join(f"{f} must be a string" for f in wrong_type),
                    write=True,
                )
            )

        document = user.new_document(payload["email"], payload["password"])
        try:
            created = User.model_validate(document)
            await self.users.insert_one(document)
        except Exception as exc:
            logger.warning("User registration failed: %s", exc)
            return Err(PersistenceError(message=str(exc), write=True, context={"operation": "register"}))

        logger.info("User registered: %s", created.id)
        return Ok(created)

    async def login(self, payload: Any) -> Result[TokenResponse, ProductManagementError]:
        if _missing_fields(payload) or not isinstance(payload["email"], str):
            return Err(AuthError(message=INVALID_CREDENTIALS))

        try:
            document = await self.users.find_one({"email": payload["email"]})
            account = User.model_validate(document) if document is not None else None
        except Exception as exc:
            logger.error("User lookup failed: %s", exc, exc_info=True)
            return Err(PersistenceError(message=str(exc), write=False, context={"operation": "login"}))

        if account is None or not _passwords_match(document.get("password"), payload["password"]):
            return Err(AuthError(message=INVALID_CREDENTIALS))

        return Ok(self.issue_token(account))
