"""
Knowledge-base document CRUD operations.

Dependencies: sqlalchemy, solarchat.boundary.db.models
System role: Document library persistence
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from solarchat.boundary.db.CRUD.base_crud import BaseCRUD
from solarchat.boundary.db.models.rag_document_model import RagDocumentModel


class RagDocumentCRUD(BaseCRUD[RagDocumentModel]):
    """CRUD operations for RagDocumentModel."""

    def __init__(self) -> None:
        super().__init__(RagDocumentModel)

    async def get_all_by_created(self, session: AsyncSession) -> Sequence[RagDocumentModel]:
        """Retrieve all documents, oldest first."""
        stmt = select(RagDocumentModel).order_by(
            RagDocumentModel.created_at,
            RagDocumentModel.id,
        )
        result = await session.execute(stmt)
        return result.scalars().all()


rag_document_crud = RagDocumentCRUD()
