"""
Product Management API — Tagged Results
=========================================

What:  `Ok` / `Err` containers returned by validation and controller operations.
Why:   Failures travel as values through the service layer and are turned into
       HTTP status codes in exactly one place (the route boundary), instead of
       exceptions crossing layers.
How:   Callers branch with `isinstance(result, Err)` or `result.is_ok`.

Example:
    result = await service.get(category_id)
    if isinstance(result, Err):
        return error_response(result.error)
    document = result.value
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying a typed error."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]
