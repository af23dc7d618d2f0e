"""
Shared response schemas: error body, confirmation message, health.
"""

from typing import List, Union

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Error body for every failure.

    `message` is a list for validation failures and a string otherwise:
        {"message": ["Category name is required"]}
        {"message": "Category not found"}
    """

    message: Union[str, List[str]] = Field(description="Error description or list of violations")


class MessageResponse(BaseModel):
    message: str = Field(examples=["Category deleted successfully"])


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
