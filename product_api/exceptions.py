"""
Product Management API — Error Taxonomy
=========================================

What:  Application error types, each bound to the HTTP status it maps to.
Why:   A small closed set of failures keeps the route boundary trivial:
       `status_code` and `detail` are all it needs to build a response.
How:   Controllers return these inside `Err(...)`. Only `AuthError` is raised,
       because the auth dependency has no return channel; a global handler
       converts it.

Hierarchy:
    ProductManagementError (base)
    ├── ValidationError   → 400, list of field messages
    ├── NotFoundError     → 404, single message
    ├── PersistenceError  → 500 for reads, 400 for writes
    └── AuthError         → 401, opaque message
"""

from typing import Any, Dict, List, Optional, Union


class ProductManagementError(Exception):
    """
    Base class for application errors.

    Attributes:
        message:  User-facing description (safe to return in a response)
        context:  Extra debug info, logged but never returned to the client
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    @property
    def detail(self) -> Union[str, List[str]]:
        """Value placed under `message` in the JSON error body."""
        return self.message


class ValidationError(ProductManagementError):
    """
    Client input failed schema validation.

    Carries every violation, not just the first, so the client can fix the
    whole payload in one round trip.
    """

    status_code = 400

    def __init__(
        self,
        messages: List[str],
        context: Optional[Dict[str, Any]] = None,
    ):
        self.messages = list(messages)
        super().__init__(message="; ".join(self.messages), context=context)

    @property
    def detail(self) -> List[str]:
        return self.messages


class NotFoundError(ProductManagementError):
    """The requested document does not exist."""

    status_code = 404

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource


class PersistenceError(ProductManagementError):
    """
    A document-store call failed.

    The status depends on the operation kind: reads (list, get, delete) map
    to 500, writes (create, update) map to 400. The driver's own message is
    passed through, e.g. a duplicate-key report on create.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        write: bool = False,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.write = write

    @property
    def status_code(self) -> int:  # type: ignore[override]
        return 400 if self.write else 500


class AuthError(ProductManagementError):
    """Missing, malformed, expired or wrongly signed bearer token."""

    status_code = 401

    def __init__(
        self,
        message: str = "Unauthorized",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
