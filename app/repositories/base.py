"""
Base repository pattern for MongoDB data access.

Provides the CRUD primitives shared by the catalog collections. Driver
errors are mapped to service errors here, at the call site.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.core.errors import ConnectivityError, ErrorResponse
from app.core.logger import logger
from app.models.product import CatalogModel
from app.utils.object_id import parse_object_id

T = TypeVar("T", bound=CatalogModel)


class BaseRepository(Generic[T]):
    """
    Generic CRUD operations over one MongoDB collection.

    Usage:
        class ProductRepository(BaseRepository[Product]):
            model_class = Product
    """

    model_class: Type[T]

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    @property
    def collection_name(self) -> str:
        return self.collection.name

    def _duplicate_key_error(self, error: DuplicateKeyError) -> ErrorResponse:
        """Error raised when a write violates a unique index"""
        return ConnectivityError(f"Duplicate key in {self.collection_name}")

    def _database_error(self, operation: str, error: PyMongoError) -> ConnectivityError:
        logger.error(
            f"MongoDB error during {operation} in {self.collection_name}",
            error=error,
            metadata={"event": "mongodb_error", "collection": self.collection_name, "operation": operation}
        )
        return ConnectivityError(f"Database error during {operation}")

    async def find_by_id(self, document_id: str) -> Optional[T]:
        """Find a document by ID; malformed IDs are simply not found"""
        object_id = parse_object_id(document_id)
        if object_id is None:
            return None
        return await self.find_one({"_id": object_id})

    async def find_one(self, query: Dict[str, Any], sort: Optional[Sequence[Tuple[str, int]]] = None) -> Optional[T]:
        try:
            doc = await self.collection.find_one(query, sort=sort)
        except PyMongoError as e:
            raise self._database_error("lookup", e) from e
        return self.model_class.from_document(doc)

    async def find_many(self, query: Dict[str, Any], sort: Sequence[Tuple[str, int]]) -> List[T]:
        try:
            cursor = self.collection.find(query).sort(list(sort))
            docs = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise self._database_error("listing", e) from e
        return [self.model_class.from_document(doc) for doc in docs]

    async def insert(self, document: Dict[str, Any]) -> T:
        """Insert a document, stamping createdAt/updatedAt"""
        now = datetime.now(timezone.utc)
        doc = {**document, "createdAt": now, "updatedAt": now}
        try:
            result = await self.collection.insert_one(doc)
        except DuplicateKeyError as e:
            raise self._duplicate_key_error(e) from e
        except PyMongoError as e:
            raise self._database_error("creation", e) from e

        doc["_id"] = result.inserted_id
        return self.model_class.from_document(doc)

    async def update_fields(self, document_id: str, fields: Dict[str, Any]) -> Optional[T]:
        """
        Apply a $set of the given fields and return the updated record.

        Returns None when no document has that ID.
        """
        object_id = parse_object_id(document_id)
        if object_id is None:
            return None

        update = {**fields, "updatedAt": datetime.now(timezone.utc)}
        try:
            doc = await self.collection.find_one_and_update(
                {"_id": object_id},
                {"$set": update},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise self._duplicate_key_error(e) from e
        except PyMongoError as e:
            raise self._database_error("update", e) from e

        return self.model_class.from_document(doc)

    async def delete_by_id(self, document_id: str) -> bool:
        object_id = parse_object_id(document_id)
        if object_id is None:
            return False
        try:
            result = await self.collection.delete_one({"_id": object_id})
        except PyMongoError as e:
            raise self._database_error("deletion", e) from e
        return result.deleted_count > 0
