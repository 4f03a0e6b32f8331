"""
MongoDB integration.

This module owns the connection to the document store
(``connect_database``) and the ``Repository`` wrapper used by the
service layer.  A repository is bound to a single collection and
exposes the handful of operations the API needs.  It takes care of
three things so that services do not have to:

* translating external string identifiers into ``ObjectId`` values
  (a malformed identifier raises ``InvalidIdentifierError``);
* reporting single-document misses as ``NotFoundError`` instead of
  ``None``;
* wrapping every driver failure in ``StorageError``.

Documents leave the repository with ``_id`` replaced by a string
``id`` field.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from bson import ObjectId
from pymongo import AsyncMongoClient, ReturnDocument
from pymongo.errors import PyMongoError

from .config import Settings
from .errors import InvalidIdentifierError, NotFoundError, StorageError

logger = logging.getLogger(__name__)

PRODUCTS = "products"
USERS = "users"
ORDERS = "orders"
DOCUMENTS = "documents"


async def connect_database(config: Settings) -> AsyncMongoClient:
    """Open the MongoDB client and make sure the server answers.

    The client is created once per process.  A ``ping`` is issued so
    that a missing or unreachable server is detected at startup rather
    than on the first request.

    Raises
    ------
    StorageError
        If the server cannot be reached within
        ``config.mongodb_timeout_ms``.
    """
    client: AsyncMongoClient = AsyncMongoClient(
        config.mongodb_url,
        serverSelectionTimeoutMS=config.mongodb_timeout_ms,
        tz_aware=True,
    )
    try:
        await client.admin.command("ping")
    except PyMongoError as exc:
        logger.error("Failed to connect to MongoDB: %s", type(exc).__name__)
        await client.close()
        raise StorageError("Failed to connect to MongoDB") from exc
    logger.info("Connected to MongoDB, using database '%s'", config.database_name)
    return client


def to_object_id(value: Any, loc: Sequence[str] = ("path", "id")) -> ObjectId:
    """Convert an external identifier into an ``ObjectId``.

    Only 24 character hexadecimal strings are accepted.
    """
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidIdentifierError(value, loc)
    return ObjectId(value)


def serialize_doc(doc: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """Return a copy of ``doc`` with ``_id`` exposed as a string ``id``."""
    if doc is None:
        return None
    doc = dict(doc)
    if "_id" in doc:
        doc["id"] = str(doc.pop("_id"))
    return doc


class Repository:
    """Async CRUD operations over one MongoDB collection."""

    def __init__(self, collection: Any, entity: str = "Document") -> None:
        self.collection = collection
        self.entity = entity

    @property
    def name(self) -> str:
        return self.collection.name

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        try:
            yield
        except PyMongoError as exc:
            logger.exception("Failed to %s in collection '%s'", action, self.name)
            raise StorageError(f"Failed to {action}") from exc

    async def insert_one(self, document: Mapping[str, Any]) -> str:
        """Insert ``document`` and return the identifier assigned to it."""
        with self._guard("insert document"):
            result = await self.collection.insert_one(dict(document))
        return str(result.inserted_id)

    async def insert_many(self, documents: Sequence[Mapping[str, Any]]) -> List[str]:
        with self._guard("insert documents"):
            result = await self.collection.insert_many([dict(d) for d in documents])
        return [str(oid) for oid in result.inserted_ids]

    async def find_one(self, document_id: Any) -> Dict[str, Any]:
        """Fetch one document by id or raise ``NotFoundError``."""
        oid = to_object_id(document_id)
        with self._guard("find document"):
            doc = await self.collection.find_one({"_id": oid})
        if doc is None:
            raise NotFoundError(self.entity, document_id)
        return serialize_doc(doc)

    async def find_all(
        self,
        filter: Optional[Mapping[str, Any]] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Return documents matching ``filter`` in insertion order.

        ``limit=None`` returns every match after the first ``skip``.
        """
        with self._guard("find documents"):
            cursor = self.collection.find(dict(filter or {}), skip=skip, limit=limit or 0)
            docs = await cursor.to_list(length=None)
        return [serialize_doc(doc) for doc in docs]

    async def find_by_ids(self, document_ids: Sequence[Any], loc: Sequence[str] = ("body", "ids")) -> List[Dict[str, Any]]:
        """Return the documents whose id is in ``document_ids``.

        Each document is returned once regardless of how often its id
        appears.  Ids without a matching document are simply absent
        from the result.
        """
        oids = list({to_object_id(value, loc) for value in document_ids})
        if not oids:
            return []
        return await self.find_all({"_id": {"$in": oids}})

    async def update_one(self, document_id: Any, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """Set ``fields`` on one document and return the updated document."""
        oid = to_object_id(document_id)
        with self._guard("update document"):
            doc = await self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": dict(fields)},
                return_document=ReturnDocument.AFTER,
            )
        if doc is None:
            raise NotFoundError(self.entity, document_id)
        return serialize_doc(doc)

    async def update_where(self, filter: Mapping[str, Any], fields: Mapping[str, Any]) -> Tuple[int, int]:
        """Set ``fields`` on the first document matching ``filter``.

        Returns the ``(matched, modified)`` counts.
        """
        with self._guard("update document"):
            result = await self.collection.update_one(dict(filter), {"$set": dict(fields)})
        return result.matched_count, result.modified_count

    async def delete_one(self, document_id: Any) -> None:
        """Delete one document by id or raise ``NotFoundError``."""
        oid = to_object_id(document_id)
        with self._guard("delete document"):
            result = await self.collection.delete_one({"_id": oid})
        if result.deleted_count == 0:
            raise NotFoundError(self.entity, document_id)

    async def delete_many(self, filter: Mapping[str, Any]) -> int:
        with self._guard("delete documents"):
            result = await self.collection.delete_many(dict(filter))
        return result.deleted_count

    async def create_index(self, keys: Sequence[Tuple[str, int]]) -> str:
        with self._guard("create index"):
            return await self.collection.create_index(list(keys))

