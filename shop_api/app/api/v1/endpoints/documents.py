"""
Demonstration endpoints for the ``documents`` collection.

These routes exercise the basic MongoDB driver operations (insert
many, find with and without a filter, update, delete, index) against
a fixed set of sample documents.  They are kept for smoke-testing a
deployment and are not part of the shop domain.
"""

from fastapi import APIRouter, Depends, status

from shop_api.app.api.deps import get_document_service
from shop_api.app.schemas.common import (
    DocumentsDeleted,
    DocumentsInserted,
    DocumentsRead,
    DocumentsUpdated,
    IndexCreated,
)
from shop_api.app.services.document_service import DocumentService

router = APIRouter()


@router.post("/insert-documents", response_model=DocumentsInserted, status_code=status.HTTP_201_CREATED)
async def insert_documents(service: DocumentService = Depends(get_document_service)) -> DocumentsInserted:
    inserted = await service.insert_samples()
    return DocumentsInserted(message="Documents inserted", insertedIds=inserted)


@router.get("/find-documents", response_model=DocumentsRead)
async def find_documents(service: DocumentService = Depends(get_document_service)) -> DocumentsRead:
    return DocumentsRead(message="Documents found", documents=await service.find_all())


@router.get("/find-documents-filtered", response_model=DocumentsRead)
async def find_documents_filtered(service: DocumentService = Depends(get_document_service)) -> DocumentsRead:
    """Return the documents where ``a == 3``."""
    return DocumentsRead(message="Filtered documents found", documents=await service.find_filtered())


@router.put("/update-documents", response_model=DocumentsUpdated)
async def update_documents(service: DocumentService = Depends(get_document_service)) -> DocumentsUpdated:
    """Set ``b = 1`` on the first document where ``a == 3``."""
    matched, modified = await service.update_filtered()
    return DocumentsUpdated(message="Documents updated", matchedCount=matched, modifiedCount=modified)


@router.delete("/delete-documents", response_model=DocumentsDeleted)
async def delete_documents(service: DocumentService = Depends(get_document_service)) -> DocumentsDeleted:
    """Delete every document where ``a == 3``."""
    deleted = await service.delete_filtered()
    return DocumentsDeleted(message="Documents deleted", deletedCount=deleted)


@router.post("/index-documents", response_model=IndexCreated, status_code=status.HTTP_201_CREATED)
async def index_documents(service: DocumentService = Depends(get_document_service)) -> IndexCreated:
    """Create an ascending index on ``a``."""
    name = await service.create_index()
    return IndexCreated(message="Index created", indexName=name)
