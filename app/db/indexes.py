"""
Database index management for MongoDB.

Indexes are created once, when the connection is first established.
The unique slug index is what rejects the second of two colliding product writes.
Index names are left to MongoDB (slug_1, email_1, ...) so databases that
already carry those indexes are reused as-is.
"""

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import OperationFailure

from app.core.logger import logger

# IndexOptionsConflict, IndexKeySpecsConflict
INDEX_CONFLICT_CODES = (85, 86)


async def _ensure_index(collection: AsyncIOMotorCollection, keys, **options) -> None:
    try:
        await collection.create_index(keys, **options)
    except OperationFailure as e:
        if e.code not in INDEX_CONFLICT_CODES:
            raise
        # An equivalent index with other options already exists; keep it
        logger.warning(
            f"Keeping existing index on {collection.name}",
            error=e,
            metadata={"event": "mongodb_index_conflict", "collection": collection.name, "keys": keys}
        )


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """
    Create all required MongoDB indexes.

    Args:
        db: MongoDB database instance
    """
    products = db["products"]
    await _ensure_index(products, [("slug", ASCENDING)], unique=True)
    await _ensure_index(products, [("createdAt", DESCENDING)])

    heroes = db["heroes"]
    await _ensure_index(heroes, [("isActive", ASCENDING), ("order", ASCENDING)])

    admins = db["admins"]
    await _ensure_index(admins, [("email", ASCENDING)], unique=True)

    logger.info("MongoDB indexes ensured", metadata={"event": "mongodb_indexes_created"})
