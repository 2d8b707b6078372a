"""
Document service orchestrator.

Manages the knowledge-base document library: every create or update
re-chunks the document text so retrieval always sees current content.

Dependencies: solarchat.boundary.db.CRUD, solarchat.core.chunker
System role: Document library use case orchestration
"""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from solarchat.boundary.db.CRUD.rag_chunk_crud import rag_chunk_crud
from solarchat.boundary.db.CRUD.rag_document_crud import rag_document_crud
from solarchat.boundary.db.errors import translate_db_errors
from solarchat.boundary.db.models.rag_chunk_model import RagChunkModel
from solarchat.boundary.db.models.rag_document_model import RagDocumentModel
from solarchat.configs.chat import ChatSettings
from solarchat.core.chunker import chunk_text
from solarchat.core.exceptions import DocumentNotFoundError, ValidationError

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 255
SOURCE_MAX_LENGTH = 1024


def _validate_document_fields(
    content: str | None,
    title: str | None,
    source: str | None,
) -> str:
    if not isinstance(content, str) or not content.strip():
        raise ValidationError("Document content is required", field="content")
    if title is not None and len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Title must be at most {TITLE_MAX_LENGTH} characters",
            field="title",
        )
    if source is not None and len(source) > SOURCE_MAX_LENGTH:
        raise ValidationError(
            f"Source must be at most {SOURCE_MAX_LENGTH} characters",
            field="source",
        )
    return content


class DocumentService:
    """Document library service."""

    def __init__(self, db: AsyncSession, settings: ChatSettings | None = None) -> None:
        """
        Initialize document service.

        Args:
            db: Async SQLAlchemy session
            settings: Chunking configuration (defaults when omitted)
        """
        self.db = db
        self.settings = settings or ChatSettings()

    async def list_documents(self) -> Sequence[RagDocumentModel]:
        """List all documents, oldest first."""
        return await rag_document_crud.get_all_by_created(self.db)

    async def get_document(
        self,
        document_id: int,
    ) -> tuple[RagDocumentModel, Sequence[RagChunkModel]]:
        """
        Get a document and its chunks ordered by chunk_index.

        Raises:
            DocumentNotFoundError: If the document does not exist
        """
        document = await rag_document_crud.get_by_id(self.db, document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)

        chunks = await rag_chunk_crud.get_by_document(self.db, document_id)
        return document, chunks

    async def create_document(
        self,
        content: str | None,
        title: str | None = None,
        source: str | None = None,
    ) -> RagDocumentModel:
        """
        Store a document and its chunks in a single transaction.

        Args:
            content: Full document text
            title: Optional display title
            source: Optional provenance

        Returns:
            RagDocumentModel: The persisted document

        Raises:
            ValidationError: If content is missing or a field is too long
            PersistenceError: If the insert fails
        """
        content = _validate_document_fields(content, title, source)
        chunks = chunk_text(content, self.settings.max_chunk_size)

        async with translate_db_errors(self.db, "create_document"):
            document = await rag_document_crud.create(
                self.db,
                title=title,
                content=content,
                source=source,
            )
            await rag_chunk_crud.create_many(self.db, document.id, chunks)
            await self.db.commit()

        logger.info(
            "Document created",
            extra={"document_id": document.id, "chunk_count": len(chunks)},
        )
        return document

    async def update_document(
        self,
        document_id: int,
        content: str | None,
        title: str | None = None,
        source: str | None = None,
    ) -> RagDocumentModel:
        """
        Replace a document's fields and re-chunk its content.

        Old chunks are deleted and the new ones inserted in the same
        transaction, so a failure leaves the previous version intact.

        Args:
            document_id: Document to update
            content: New full text
            title: New title (None clears it)
            source: New provenance (None clears it)

        Returns:
            RagDocumentModel: The updated document

        Raises:
            ValidationError: If content is missing or a field is too long
            DocumentNotFoundError: If the document does not exist
            PersistenceError: If the update fails
        """
        content = _validate_document_fields(content, title, source)

        document = await rag_document_crud.get_by_id(self.db, document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)

        chunks = chunk_text(content, self.settings.max_chunk_size)

        async with translate_db_errors(self.db, "update_document"):
            document = await rag_document_crud.update_instance(
                self.db,
                document,
                title=title,
                content=content,
                source=source,
            )
            removed = await rag_chunk_crud.delete_by_document_id(self.db, document_id)
            await rag_chunk_crud.create_many(self.db, document_id, chunks)
            await self.db.commit()

        logger.info(
            "Document updated",
            extra={
                "document_id": document_id,
                "chunks_removed": removed,
                "chunk_count": len(chunks),
            },
        )
        return document

    async def delete_document(self, document_id: int) -> None:
        """
        Delete a document and its chunks.

        Raises:
            DocumentNotFoundError: If the document does not exist
            PersistenceError: If the delete fails
        """
        async with translate_db_errors(self.db, "delete_document"):
            await rag_chunk_crud.delete_by_document_id(self.db, document_id)
            deleted = await rag_document_crud.delete_by_id(self.db, document_id)
            if not deleted:
                await self.db.rollback()
                raise DocumentNotFoundError(document_id)
            await self.db.commit()

        logger.info("Document deleted", extra={"document_id": document_id})
