"""
Admin repository
"""

from typing import Optional

from pymongo.errors import DuplicateKeyError

from app.core.errors import ValidationError
from app.models.admin import Admin
from app.repositories.base import BaseRepository


class AdminRepository(BaseRepository[Admin]):
    """Repository for admin accounts"""

    model_class = Admin

    def _duplicate_key_error(self, error: DuplicateKeyError) -> ValidationError:
        return ValidationError("Admin with this email already exists")

    async def get_by_email(self, email: str) -> Optional[Admin]:
        return await self.find_one({"email": email.strip().lower()})

    async def get_by_id(self, admin_id: str) -> Optional[Admin]:
        return await self.find_by_id(admin_id)

    async def create(self, email: str, password_hash: str) -> Admin:
        return await self.insert({"email": email.strip().lower(), "passwordHash": password_hash})
