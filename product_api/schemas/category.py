"""Category request schemas."""

from typing import ClassVar, Dict, Optional, Tuple

from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    """
    Body of POST /categories.

    Unknown fields are accepted and stored as-is (`extra="allow"`); only the
    three declared fields are checked.
    """

    categoryId: str = Field(min_length=1, description="Unique identifier for the category", examples=["cat12345"])
    name: str = Field(min_length=1, max_length=100, description="Category's name", examples=["Electronics"])
    description: Optional[str] = Field(
        default=None,
        max_length=500,
        description="A brief description of the category",
        examples=["Products related to electronic devices."],
    )

    model_config = {"extra": "allow"}

    messages: ClassVar[Dict[Tuple[str, str], str]] = {
        ("categoryId", "missing"): "Category ID is required",
        ("categoryId", "string_too_short"): "Category ID is required",
        ("name", "missing"): "Category name is required",
        ("name", "string_too_short"): "Category name is required",
        ("name", "string_too_long"): "Category name cannot exceed 100 characters",
        ("description", "string_too_long"): "Description cannot exceed 500 characters",
    }


class CategoryUpdate(BaseModel):
    """Body of PUT /categories/{id}: any subset of the create fields."""

    categoryId: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)

    model_config = {"extra": "allow"}

    messages: ClassVar[Dict[Tuple[str, str], str]] = {
        ("categoryId", "string_too_short"): "Category ID cannot be empty",
        ("name", "string_too_short"): "Category name cannot be empty",
        ("name", "string_too_long"): "Category name cannot exceed 100 characters",
        ("description", "string_too_long"): "Description cannot exceed 500 characters",
    }
