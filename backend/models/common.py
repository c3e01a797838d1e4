"""
Common response models.

Error schema shared by all routers.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Error payload placed under the HTTPException detail key."""

    error_type: str = Field(description="Exception class name, e.g. SessionNotFoundError")
    message: str = Field(description="Human-readable error message")
    details: dict | None = Field(default=None, description="Additional error context")
