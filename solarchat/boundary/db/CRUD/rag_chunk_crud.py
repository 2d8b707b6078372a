"""
Document chunk CRUD operations.

Provides bulk insert for freshly chunked documents, per-document
listing and replacement, and the candidate scan used by retrieval.

Dependencies: sqlalchemy, solarchat.boundary.db.models
System role: Chunk store for keyword retrieval
"""

from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from solarchat.boundary.db.CRUD.base_crud import BaseCRUD
from solarchat.boundary.db.models.rag_chunk_model import RagChunkModel
from solarchat.models.chunk import ChunkCandidate, TextChunk


class RagChunkCRUD(BaseCRUD[RagChunkModel]):
    """CRUD operations for RagChunkModel."""

    def __init__(self) -> None:
        super().__init__(RagChunkModel)

    async def create_many(
        self,
        session: AsyncSession,
        document_id: int,
        chunks: Sequence[TextChunk],
    ) -> list[RagChunkModel]:
        """
        Insert all chunks of one document.

        Args:
            session: Async database session
            document_id: Parent document ID
            chunks: Chunker output, in chunk_index order

        Returns:
            Persisted chunk rows in the same order
        """
        instances = [
            RagChunkModel(
                document_id=document_id,
                content=chunk.content,
                chunk_index=chunk.chunk_index,
                chunk_metadata={},
            )
            for chunk in chunks
        ]
        session.add_all(instances)
        await session.flush()
        return instances

    async def get_by_document(
        self,
        session: AsyncSession,
        document_id: int,
    ) -> Sequence[RagChunkModel]:
        """Retrieve one document's chunks ordered by chunk_index."""
        stmt = (
            select(RagChunkModel)
            .where(RagChunkModel.document_id == document_id)
            .order_by(RagChunkModel.chunk_index)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_all_candidates(self, session: AsyncSession) -> list[ChunkCandidate]:
        """
        Load every chunk of every document for scoring.

        Rows come back in ascending chunk ID so that equal scores keep
        a deterministic order after the stable sort in ranking.

        Returns:
            list[ChunkCandidate]: Lightweight id/document_id/content views
        """
        stmt = select(
            RagChunkModel.id,
            RagChunkModel.document_id,
            RagChunkModel.content,
        ).order_by(RagChunkModel.id)
        result = await session.execute(stmt)
        return [
            ChunkCandidate(id=row.id, document_id=row.document_id, content=row.content)
            for row in result
        ]

    async def delete_by_document_id(self, session: AsyncSession, document_id: int) -> int:
        """
        Delete all chunks of a document.

        Returns:
            int: Number of chunks removed
        """
        result = await session.execute(
            delete(RagChunkModel).where(RagChunkModel.document_id == document_id)
        )
        return result.rowcount


rag_chunk_crud = RagChunkCRUD()
