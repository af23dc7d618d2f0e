"""
Product Management API — Request Validation
=============================================

What:  One function that checks an arbitrary payload against a request schema.
Why:   Validation failure is an expected outcome, not an exceptional one, so it
       comes back as a value (`Err(ValidationError)`) that the controller can
       return unchanged.
How:   pydantic does the checking and coercion; its error list is translated
       into human-readable messages, one per offending field, in field order.

Example:
    result = validate(CategoryCreate, {"categoryId": "c1"})
    # Err(ValidationError(["Category name is required"]))
"""

from typing import Any, Dict, Iterable, List, Mapping, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from product_api.exceptions import ValidationError
from product_api.results import Err, Ok, Result

M = TypeVar("M", bound=BaseModel)

# Generic text per pydantic error type, used when a schema has no override
_FALLBACK_MESSAGES: Dict[str, str] = {
    "missing": '"{field}" is required',
    "string_type": '"{field}" must be a string',
    "string_too_short": '"{field}" is not allowed to be empty',
    "string_too_long": '"{field}" length must be less than or equal to {max_length} characters long',
    "float_type": '"{field}" must be a number',
    "float_parsing": '"{field}" must be a number',
    "finite_number": '"{field}" must be a number',
    "int_type": '"{field}" must be an integer',
    "int_parsing": '"{field}" must be an integer',
    "int_from_float": '"{field}" must be an integer',
    "model_type": '"{field}" must be of type object',
    "model_attributes_type": '"{field}" must be of type object',
    "dict_type": '"{field}" must be of type object',
}


def _message_for(error: Mapping[str, Any], overrides: Mapping[Tuple[str, str], str]) -> str:
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else "value"
    error_type = error.get("type", "")

    custom = overrides.get((field, error_type))
    if custom:
        return custom

    template = _FALLBACK_MESSAGES.get(error_type)
    if template is None:
        return f'"{field}" {error.get("msg", "is invalid")}'
    try:
        return template.format(field=field, **(error.get("ctx") or {}))
    except (KeyError, IndexError):
        return f'"{field}" {error.get("msg", "is invalid")}'


def collect_messages(
    errors: Iterable[Mapping[str, Any]],
    overrides: Mapping[Tuple[str, str], str],
) -> List[str]:
    """Translate pydantic errors into unique messages, preserving order."""
    messages: List[str] = []
    for error in errors:
        message = _message_for(error, overrides)
        if message not in messages:
            messages.append(message)
    return messages


def validate(schema: Type[M], payload: Any) -> Result[M, ValidationError]:
    """
    Validate `payload` against `schema`.

    Returns:
        Ok(model) with coerced values, or Err(ValidationError) listing every
        violation found (validation does not stop at the first).
    """
    try:
        return Ok(schema.model_validate(payload))
    except PydanticValidationError as exc:
        overrides = getattr(schema, "messages", {})
        return Err(
            ValidationError(
                collect_messages(exc.errors(), overrides),
                context={"schema": schema.__name__},
            )
        )
