"""
Document chunk ORM model.

Dependencies: sqlalchemy, solarchat.boundary.db.base
System role: Retrieval unit scored against user queries
"""

from sqlalchemy import JSON, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from solarchat.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class RagChunkModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Document chunk ORM model.

    Attributes:
        id: Integer primary key; ascending id is the retrieval tie-break
        document_id: Parent document ID
        content: Chunk text
        chunk_index: 0-based position within the parent document
        chunk_metadata: Free-form JSON, stored in the "metadata" column
    """

    __tablename__ = "rag_chunks"

    document_id: Mapped[int] = mapped_column(
        ForeignKey("rag_documents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    chunk_index: Mapped[int] = mapped_column(Integer, nullable=False)
    # "metadata" is reserved on declarative classes
    chunk_metadata: Mapped[dict] = mapped_column(
        "metadata",
        JSON,
        nullable=False,
        default=dict,
    )

    document = relationship("RagDocumentModel", back_populates="chunks", lazy="raise")
