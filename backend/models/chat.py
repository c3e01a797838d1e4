"""
Chat domain models and schemas.

Request/response schemas for chat operations.

Dependencies: pydantic
System role: Chat API contracts
"""

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Request schema for chat messages."""

    message: str = Field(min_length=1, description="User question or message")


class ChatResponse(BaseModel):
    """Response schema for chat messages."""

    answer: str = Field(description="Generated answer grounded in the session's notes")
