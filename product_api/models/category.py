"""Category documents (`categories` collection)."""

from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, Field

from product_api.models import PyObjectId

COLLECTION = "categories"
LABEL = "Category"


class Category(BaseModel):
    """
    A stored category.

    `extra="allow"`: fields outside the schema that were accepted on create
    or update are stored and echoed back unchanged.
    """

    id: PyObjectId = Field(alias="_id", description="Document identifier")
    categoryId: str = Field(description="Business identifier, unique across categories")
    name: str = Field(description="Category name (max 100 chars)")
    description: Optional[str] = Field(default=None, description="Optional description (max 500 chars)")

    model_config = {"populate_by_name": True, "extra": "allow"}


def new_document(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Fresh document for insert: generated `_id` plus the validated fields."""
    return {"_id": ObjectId(), **payload}
