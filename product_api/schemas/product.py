"""Product request schema (create and update share it)."""

from typing import Annotated, Any, Callable, ClassVar, Dict, Tuple

from pydantic import BaseModel, BeforeValidator, Field
from pydantic_core import PydanticCustomError


def _reject_bool(error_type: str, message: str) -> Callable[[Any], Any]:
    # Lax mode would read true/false as 1/0
    def check(value: Any) -> Any:
        if isinstance(value, bool):
            raise PydanticCustomError(error_type, message)
        return value

    return check


Price = Annotated[float, BeforeValidator(_reject_bool("float_type", "Input should be a valid number"))]
Quantity = Annotated[int, BeforeValidator(_reject_bool("int_type", "Input should be a valid integer"))]


class ProductCreate(BaseModel):
    """
    Body of POST /products and PUT /products/{id}.

    Numeric strings are coerced ("9.99" → 9.99); booleans, NaN and infinity
    are rejected. Unknown fields are dropped. `categoryId` is not checked
    against the categories collection.
    """

    name: str = Field(min_length=1, examples=["Wireless Mouse"])
    description: str = Field(min_length=1, examples=["2.4 GHz ergonomic mouse"])
    price: Price = Field(allow_inf_nan=False, examples=[24.99])
    stockQuantity: Quantity = Field(examples=[150])
    categoryId: str = Field(min_length=1, examples=["cat12345"])
    supplierId: str = Field(min_length=1, examples=["sup001"])

    model_config = {"extra": "ignore"}

    messages: ClassVar[Dict[Tuple[str, str], str]] = {
        ("name", "missing"): "Product name is required",
        ("name", "string_too_short"): "Product name is required",
        ("description", "missing"): "Product description is required",
        ("description", "string_too_short"): "Product description is required",
        ("price", "missing"): "Price is required",
        ("price", "float_parsing"): "Price must be a number",
        ("price", "float_type"): "Price must be a number",
        ("price", "finite_number"): "Price must be a number",
        ("stockQuantity", "missing"): "Stock quantity is required",
        ("stockQuantity", "int_parsing"): "Stock quantity must be an integer",
        ("stockQuantity", "int_type"): "Stock quantity must be an integer",
        ("stockQuantity", "int_from_float"): "Stock quantity must be an integer",
        ("categoryId", "missing"): "Category ID is required",
        ("categoryId", "string_too_short"): "Category ID is required",
        ("supplierId", "missing"): "Supplier ID is required",
        ("supplierId", "string_too_short"): "Supplier ID is required",
    }
