"""Shared test fixtures"""
import pytest
from unittest.mock import MagicMock
from datetime import datetime, timezone
from bson import ObjectId

from app.clients.object_storage import S3ObjectStorage
from app.core.config import Config
from app.core.security import TokenService


PRODUCT_ID = "507f1f77bcf86cd799439011"
HERO_ID = "507f1f77bcf86cd799439022"
ADMIN_ID = "507f1f77bcf86cd799439033"

CDN_URL = "https://cdn.example.com"
JWT_SECRET = "test-secret-key-with-enough-length-for-hs256"


@pytest.fixture
def test_config():
    """Config isolated from the environment and any .env file"""
    return Config(
        _env_file=None,
        mongodb_uri="mongodb://localhost:27017/catalog_test",
        jwt_secret=JWT_SECRET,
        s3_bucket_name="catalog-test",
        s3_access_key_id="test-access-key",
        s3_secret_access_key="test-secret-key",
        s3_public_base_url=CDN_URL,
    )


@pytest.fixture
def s3_client():
    """Mock boto3 S3 client"""
    return MagicMock()


@pytest.fixture
def object_storage(test_config, s3_client):
    return S3ObjectStorage(test_config, client=s3_client)


@pytest.fixture
def token_service():
    return TokenService(secret=JWT_SECRET)


@pytest.fixture
def admin_token(token_service):
    return token_service.issue(ADMIN_ID)


@pytest.fixture
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def product_doc():
    """Product document as stored in MongoDB"""
    now = datetime.now(timezone.utc)
    return {
        "_id": ObjectId(PRODUCT_ID),
        "name": "Rock Phosphate",
        "slug": "rock-phosphate",
        "description": "Natural source of phosphorus",
        "category": "Phosphate Minerals",
        "specifications": {"P2O5 Content": "28%-30%"},
        "applications": ["Fertilizer Production"],
        "images": [f"{CDN_URL}/catalog-products/a.png", f"{CDN_URL}/catalog-products/b.png"],
        "featured": True,
        "createdAt": now,
        "updatedAt": now,
    }


@pytest.fixture
def hero_doc():
    """Hero slide document as stored in MongoDB"""
    now = datetime.now(timezone.utc)
    return {
        "_id": ObjectId(HERO_ID),
        "image": f"{CDN_URL}/catalog-hero/slide.jpg",
        "label": "Quality minerals",
        "order": 0,
        "isActive": True,
        "createdAt": now,
        "updatedAt": now,
    }


@pytest.fixture
def admin_doc():
    """Admin document as stored in MongoDB; hash of 'admin123'"""
    from app.core.security import hash_password
    return {
        "_id": ObjectId(ADMIN_ID),
        "email": "admin@example.com",
        "passwordHash": hash_password("admin123"),
        "createdAt": datetime.now(timezone.utc),
        "updatedAt": datetime.now(timezone.utc),
    }
