"""Unit tests for AdminRepository"""
import pytest
from unittest.mock import AsyncMock
from pymongo.errors import DuplicateKeyError

from app.core.errors import ValidationError
from app.models.admin import Admin
from app.repositories.admin import AdminRepository


class TestAdminRepository:

    @pytest.mark.asyncio
    async def test_get_by_email_is_case_insensitive(self, admin_doc):
        collection = AsyncMock()
        collection.find_one.return_value = admin_doc
        repository = AdminRepository(collection)

        admin = await repository.get_by_email("  Admin@Example.com ")

        collection.find_one.assert_awaited_once_with({"email": "admin@example.com"}, sort=None)
        assert admin.email == "admin@example.com"
        assert admin.password_hash == admin_doc["passwordHash"]

    @pytest.mark.asyncio
    async def test_create_duplicate_email(self):
        collection = AsyncMock()
        collection.name = "admins"
        collection.insert_one.side_effect = DuplicateKeyError("E11000")

        with pytest.raises(ValidationError, match="already exists"):
            await AdminRepository(collection).create("admin@example.com", "hash")

    def test_public_view_excludes_password(self, admin_doc):
        admin = Admin.from_document(admin_doc)
        public = admin.to_public().model_dump(by_alias=True)
        assert "passwordHash" not in public
        assert "password_hash" not in public
        assert public["email"] == "admin@example.com"
