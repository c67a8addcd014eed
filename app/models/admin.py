"""
Admin models for authentication
"""

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from app.models.product import CatalogModel, utc_now

ADMIN_ROLE = "admin"


class Admin(CatalogModel):
    """Admin record as stored, including the password hash"""

    id: str
    email: str
    password_hash: str = Field(validation_alias=AliasChoices("passwordHash", "password"))
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def to_public(self) -> "AdminPublic":
        return AdminPublic(id=self.id, email=self.email, created_at=self.created_at)


class AdminPublic(CatalogModel):
    """Admin as returned to clients; never carries the password"""

    id: str
    email: str
    created_at: Optional[datetime] = None


class AdminIdentity(BaseModel):
    """Identity verified from a bearer token"""

    id: str
    role: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        """Check if the identity carries the admin capability"""
        return self.role == ADMIN_ROLE
