"""
Document domain models and schemas.

Request/response schemas for RAG document operations.

Dependencies: pydantic
System role: Document API contracts
"""

from datetime import datetime

from pydantic import Field

from solarchat.models.common import CamelModel


class DocumentRequest(CamelModel):
    """Request schema for creating or replacing a document."""

    title: str | None = Field(default=None, description="Display title")
    content: str | None = Field(default=None, description="Full document text")
    source: str | None = Field(default=None, description="Provenance (URL, file name)")


class ChunkResponse(CamelModel):
    """Stored chunk of a document."""

    id: int
    document_id: int
    content: str
    chunk_index: int
    metadata: dict = Field(default_factory=dict)


class DocumentResponse(CamelModel):
    """Response schema for document operations."""

    id: int
    title: str | None
    content: str
    source: str | None
    created_at: datetime
    updated_at: datetime


class DocumentDetailResponse(DocumentResponse):
    """Document with its chunks ordered by chunk_index."""

    chunks: list[ChunkResponse] = Field(default_factory=list)
