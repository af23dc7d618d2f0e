"""
User documents (`users` collection).

Passwords are stored exactly as submitted. The model excludes the field from
serialization so it never appears in a response.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from bson import ObjectId
from pydantic import BaseModel, Field

from product_api.models import PyObjectId

COLLECTION = "users"
LABEL = "User"


class User(BaseModel):
    id: PyObjectId = Field(alias="_id")
    email: str
    password: str = Field(default="", exclude=True, repr=False)
    createdAt: datetime
    updatedAt: datetime

    model_config = {"populate_by_name": True}


def new_document(email: Any, password: Any) -> Dict[str, Any]:
    now = datetime.now(timezone.utc)
    return {
        "_id": ObjectId(),
        "email": email,
        "password": password,
        "createdAt": now,
        "updatedAt": now,
    }
