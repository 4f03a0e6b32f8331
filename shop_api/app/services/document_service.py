"""
Demonstration operations on the untyped ``documents`` collection.

These mirror the MongoDB driver quick-start: insert a few documents,
query them with and without a filter, update one, delete matches and
create an index.  They exist to show the driver working end to end and
carry no business rules.
"""

import logging
from typing import Any, Dict, List, Tuple

from ..core.db import DOCUMENTS, Repository

logger = logging.getLogger(__name__)

SAMPLE_DOCUMENTS: List[Dict[str, Any]] = [{"a": 1}, {"a": 2}, {"a": 3}]
SAMPLE_FILTER: Dict[str, Any] = {"a": 3}


class DocumentService:
    def __init__(self, database) -> None:
        self.documents = Repository(database[DOCUMENTS])

    async def insert_samples(self) -> List[str]:
        inserted = await self.documents.insert_many(SAMPLE_DOCUMENTS)
        logger.info("Inserted %d sample documents", len(inserted))
        return inserted

    async def find_all(self) -> List[Dict[str, Any]]:
        return await self.documents.find_all()

    async def find_filtered(self) -> List[Dict[str, Any]]:
        return await self.documents.find_all(SAMPLE_FILTER)

    async def update_filtered(self) -> Tuple[int, int]:
        """Add ``b = 1`` to the first document where ``a == 3``."""
        return await self.documents.update_where(SAMPLE_FILTER, {"b": 1})

    async def delete_filtered(self) -> int:
        deleted = await self.documents.delete_many(SAMPLE_FILTER)
        logger.info("Deleted %d documents", deleted)
        return deleted

    async def create_index(self) -> str:
        return await self.documents.create_index([("a", 1)])
