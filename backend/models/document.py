"""
Document domain models and schemas.

Request/response schemas for document ingestion.

Dependencies: pydantic
System role: Document API contracts
"""

from pydantic import BaseModel, Field


class IngestTextRequest(BaseModel):
    """Request schema for ingesting raw text."""

    text: str = Field(description="Document text to segment and embed")


class UploadResponse(BaseModel):
    """Response schema for a completed ingestion."""

    session_id: str = Field(description="Session ID to use for chat")
    chunks: int = Field(description="Number of chunks stored for the session")
