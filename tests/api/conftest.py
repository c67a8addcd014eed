"""Fixtures for HTTP-level tests: the real app with storage and persistence mocked"""
from datetime import datetime, timezone

import pytest
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId
from fastapi.testclient import TestClient

from app.dependencies.auth import get_token_service
from app.dependencies.services import (
    get_auth_service,
    get_connection_manager,
    get_hero_service,
    get_image_upload_service,
    get_product_service,
)
from app.models.hero import HeroSlide
from app.models.product import Product
from app.repositories.admin import AdminRepository
from app.repositories.hero import HeroRepository
from app.repositories.product import ProductRepository
from app.services.auth import AuthService
from app.services.hero import HeroService
from app.services.image_upload import ImageUploadService
from app.services.product import ProductService
from main import create_app


def stored(model_class):
    """Side effect that echoes an inserted document back as a persisted model"""
    def insert(document):
        now = datetime.now(timezone.utc)
        return model_class.from_document({**document, "_id": ObjectId(), "createdAt": now, "updatedAt": now})
    return insert


@pytest.fixture
def product_repository():
    repository = AsyncMock(spec=ProductRepository)
    repository.create.side_effect = stored(Product)
    return repository


@pytest.fixture
def hero_repository():
    repository = AsyncMock(spec=HeroRepository)
    repository.create.side_effect = stored(HeroSlide)
    repository.max_order.return_value = None
    return repository


@pytest.fixture
def admin_repository():
    return AsyncMock(spec=AdminRepository)


@pytest.fixture
def image_service(object_storage):
    return ImageUploadService(object_storage, max_file_size=1024 * 1024)


@pytest.fixture
def connection_manager():
    manager = MagicMock()
    manager.ensure_connected = AsyncMock()
    manager.ping = AsyncMock(return_value=True)
    return manager


@pytest.fixture
def app(token_service, product_repository, hero_repository, admin_repository, image_service, connection_manager):
    app = create_app()
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_connection_manager] = lambda: connection_manager
    app.dependency_overrides[get_image_upload_service] = lambda: image_service
    app.dependency_overrides[get_product_service] = lambda: ProductService(product_repository, image_service)
    app.dependency_overrides[get_hero_service] = lambda: HeroService(hero_repository, image_service)
    app.dependency_overrides[get_auth_service] = lambda: AuthService(admin_repository, token_service)
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
