"""
Dependency injection for repositories and services

The connection manager and object storage client are created once at
startup and hung off app.state; everything built here is per request.
"""

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.clients.object_storage import S3ObjectStorage
from app.core.config import config
from app.core.security import TokenService
from app.db.mongodb import (
    ADMINS_COLLECTION,
    HERO_COLLECTION,
    PRODUCTS_COLLECTION,
    MongoConnectionManager,
)
from app.dependencies.auth import get_token_service
from app.repositories.admin import AdminRepository
from app.repositories.hero import HeroRepository
from app.repositories.product import ProductRepository
from app.services.auth import AuthService
from app.services.hero import HeroService
from app.services.image_upload import ImageUploadService
from app.services.product import ProductService


def get_connection_manager(request: Request) -> MongoConnectionManager:
    return request.app.state.connection_manager


async def get_database(
    manager: MongoConnectionManager = Depends(get_connection_manager),
) -> AsyncIOMotorDatabase:
    """Open the shared connection on first use"""
    return await manager.ensure_connected()


def get_object_storage(request: Request) -> S3ObjectStorage:
    return request.app.state.object_storage


async def get_product_repository(database: AsyncIOMotorDatabase = Depends(get_database)) -> ProductRepository:
    return ProductRepository(database[PRODUCTS_COLLECTION])


async def get_hero_repository(database: AsyncIOMotorDatabase = Depends(get_database)) -> HeroRepository:
    return HeroRepository(database[HERO_COLLECTION])


async def get_admin_repository(database: AsyncIOMotorDatabase = Depends(get_database)) -> AdminRepository:
    return AdminRepository(database[ADMINS_COLLECTION])


def get_image_upload_service(storage: S3ObjectStorage = Depends(get_object_storage)) -> ImageUploadService:
    return ImageUploadService(
        storage,
        max_file_size=config.max_upload_size,
        concurrency=config.upload_concurrency,
    )


async def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
    images: ImageUploadService = Depends(get_image_upload_service),
) -> ProductService:
    """Get product service instance"""
    return ProductService(repository, images)


async def get_hero_service(
    repository: HeroRepository = Depends(get_hero_repository),
    images: ImageUploadService = Depends(get_image_upload_service),
) -> HeroService:
    return HeroService(repository, images)


async def get_auth_service(
    repository: AdminRepository = Depends(get_admin_repository),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(repository, tokens)
