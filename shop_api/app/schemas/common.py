"""Response models shared by several endpoint modules."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class Message(BaseModel):
    """Plain acknowledgment, e.g. after a delete."""

    message: str = Field(..., examples=["Product deleted"])


class DocumentsRead(Message):
    documents: List[Dict[str, Any]] = Field(default_factory=list)


class DocumentsInserted(Message):
    inserted_ids: List[str] = Field(..., alias="insertedIds")


class DocumentsUpdated(Message):
    matched_count: int = Field(..., alias="matchedCount")
    modified_count: int = Field(..., alias="modifiedCount")


class DocumentsDeleted(Message):
    deleted_count: int = Field(..., alias="deletedCount")


class IndexCreated(Message):
    index_name: str = Field(..., alias="indexName")
