"""
MongoDB connection management

A single MongoConnectionManager is created by the process entry point and
reused by every request. The first request connects; later requests reuse
the open client. A failed attempt leaves the manager unconnected so the
next request tries again.
"""

import asyncio
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.core.config import Config, config as default_config
from app.core.errors import ConfigurationError, ConnectivityError
from app.core.logger import logger
from app.db.indexes import create_indexes

PRODUCTS_COLLECTION = "products"
HERO_COLLECTION = "heroes"
ADMINS_COLLECTION = "admins"


class MongoConnectionManager:
    """Lazily opened, process-wide MongoDB connection"""

    def __init__(self, settings: Config = default_config, client_factory=AsyncIOMotorClient):
        self._settings = settings
        self._client_factory = client_factory
        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None
        self._connected = False
        self._lock = asyncio.Lock()

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if not self._connected:
            raise ConnectivityError("Database connection has not been established")
        return self._database

    async def ensure_connected(self) -> AsyncIOMotorDatabase:
        """Connect on first use, return the shared database afterwards"""
        if self._connected:
            return self._database

        async with self._lock:
            # Another request may have connected while we waited
            if self._connected:
                return self._database

            uri = self._settings.mongodb_uri
            if not uri:
                logger.error(
                    "MONGODB_URI must be set in the environment or .env file",
                    metadata={"event": "mongodb_env_error"}
                )
                raise ConfigurationError()

            logger.info("Connecting to MongoDB...", metadata={"event": "mongodb_connect_attempt"})

            client = None
            try:
                client = self._client_factory(uri)
                database = client.get_default_database(default=self._settings.mongodb_database)

                # Test connection
                await client.admin.command("ping")
                await create_indexes(database)
            except PyMongoError as e:
                if client is not None:
                    client.close()
                logger.error(
                    "Could not connect to MongoDB",
                    error=e,
                    metadata={"event": "mongodb_connection_error"}
                )
                raise ConnectivityError() from e

            self._client = client
            self._database = database
            self._connected = True

            logger.info(
                f"Successfully connected to MongoDB database '{database.name}'",
                metadata={"event": "mongodb_connected", "database": database.name}
            )
            return database

    async def ping(self) -> bool:
        """Check that the open connection still answers"""
        if not self._connected:
            return False
        try:
            await self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning("MongoDB ping failed", error=e, metadata={"event": "mongodb_ping_failed"})
            return False

    def close(self) -> None:
        """Close database connection"""
        if self._client is not None:
            logger.info("Closing connection to MongoDB...")
            self._client.close()
