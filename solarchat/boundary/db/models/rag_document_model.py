"""
Knowledge-base document ORM model.

Dependencies: sqlalchemy, solarchat.boundary.db.base
System role: Source text for retrieval-augmented replies
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from solarchat.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class RagDocumentModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Knowledge-base document ORM model.

    The full text is kept alongside its chunks so a document can be
    re-chunked on update.

    Attributes:
        id: Integer primary key, cited by assistant messages
        title: Optional display title
        content: Full document text
        source: Optional provenance (URL, file name)
        chunks: RagChunkModel rows ordered by chunk_index (cascading delete)
    """

    __tablename__ = "rag_documents"

    title: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    source: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)

    chunks = relationship(
        "RagChunkModel",
        back_populates="document",
        cascade="all, delete-orphan",
        order_by="RagChunkModel.chunk_index",
        passive_deletes=True,
        lazy="raise",
    )
