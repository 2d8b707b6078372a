"""
Knowledge-base document API endpoints.

Routes:
- GET /rag/documents - List documents
- POST /rag/documents - Create a document and its chunks
- GET /rag/documents/{document_id} - Document with its chunks
- PUT /rag/documents/{document_id} - Replace a document and re-chunk it
- DELETE /rag/documents/{document_id} - Delete a document and its chunks

Dependencies: solarchat.application.services.document_service, solarchat.models
System role: Document library HTTP API
"""

from fastapi import APIRouter, Depends, status

from solarchat.api.deps import get_document_service
from solarchat.api.routers.error_handling import handle_api_errors
from solarchat.api.routers.responses import (
    map_document_detail_to_response,
    map_document_to_response,
)
from solarchat.application.services.document_service import DocumentService
from solarchat.models.common import MessageResponse
from solarchat.models.document import (
    DocumentDetailResponse,
    DocumentRequest,
    DocumentResponse,
)

router = APIRouter(prefix="/rag", tags=["rag"])


@router.get("/documents", response_model=list[DocumentResponse])
@handle_api_errors
async def list_documents(
    document_service: DocumentService = Depends(get_document_service),
) -> list[DocumentResponse]:
    """List all documents, oldest first."""
    documents = await document_service.list_documents()
    return [map_document_to_response(document) for document in documents]


@router.post(
    "/documents",
    response_model=DocumentResponse,
    status_code=status.HTTP_201_CREATED,
)
@handle_api_errors
async def create_document(
    request: DocumentRequest,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """
    Create a document and chunk its content.

    Raises:
        HTTPException(400): Missing content or oversized fields
    """
    document = await document_service.create_document(
        content=request.content,
        title=request.title,
        source=request.source,
    )
    return map_document_to_response(document)


@router.get("/documents/{document_id}", response_model=DocumentDetailResponse)
@handle_api_errors
async def get_document(
    document_id: int,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentDetailResponse:
    """Get a document with its chunks ordered by chunkIndex."""
    document, chunks = await document_service.get_document(document_id)
    return map_document_detail_to_response(document, chunks)


@router.put("/documents/{document_id}", response_model=DocumentResponse)
@handle_api_errors
async def update_document(
    document_id: int,
    request: DocumentRequest,
    document_service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """
    Replace a document's fields and rebuild its chunks.

    Raises:
        HTTPException(400): Missing content or oversized fields
        HTTPException(404): Document not found
    """
    document = await document_service.update_document(
        document_id,
        content=request.content,
        title=request.title,
        source=request.source,
    )
    return map_document_to_response(document)


@router.delete("/documents/{document_id}", response_model=MessageResponse)
@handle_api_errors
async def delete_document(
    document_id: int,
    document_service: DocumentService = Depends(get_document_service),
) -> MessageResponse:
    """
    Delete a document and its chunks.

    Raises:
        HTTPException(404): Document not found
    """
    await document_service.delete_document(document_id)
    return MessageResponse(message="Document deleted successfully")
