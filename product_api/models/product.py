"""
Product documents (`products` collection).

`categoryId` and `supplierId` are plain strings. Nothing checks that they
point at existing documents, and deleting a category leaves its products
untouched.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from bson import ObjectId
from pydantic import BaseModel, Field

from product_api.models import PyObjectId

COLLECTION = "products"
LABEL = "Product"


class Product(BaseModel):
    id: PyObjectId = Field(alias="_id", description="Document identifier")
    name: str
    description: str
    price: float
    stockQuantity: int
    categoryId: str = Field(description="Reference to a category's categoryId (not enforced)")
    supplierId: str = Field(description="Reference to the supplier (not enforced)")
    createdDate: datetime
    updatedDate: datetime

    model_config = {"populate_by_name": True}


def new_document(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Fresh document for insert.

    Both timestamps are set to the creation time. Later updates do not touch
    `updatedDate`.
    """
    now = datetime.now(timezone.utc)
    return {"_id": ObjectId(), **payload, "createdDate": now, "updatedDate": now}
