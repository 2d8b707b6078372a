"""
Chunk domain models.

Dependencies: pydantic
System role: Chunk data structures shared by the chunker and retriever
"""

from pydantic import BaseModel, Field


class TextChunk(BaseModel):
    """A bounded-size slice of a document produced by the chunker."""

    content: str = Field(description="Chunk text content")
    chunk_index: int = Field(ge=0, description="Position within the document")


class ChunkCandidate(BaseModel):
    """A stored chunk offered to the keyword retriever."""

    id: int = Field(description="Chunk primary key")
    document_id: int = Field(description="Parent document primary key")
    content: str = Field(description="Chunk text content")
