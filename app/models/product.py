"""
Base Product model with validation and common fields
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_now():
    """Helper function for Pydantic default_factory to get current UTC time"""
    return datetime.now(timezone.utc)


class CatalogModel(BaseModel):
    """Base for persisted records: camelCase on the wire and in MongoDB"""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    @classmethod
    def from_document(cls, doc: Optional[Dict[str, Any]]):
        """Build a model from a MongoDB document, exposing _id as id"""
        if not doc:
            return None
        data = dict(doc)
        data["id"] = str(data.pop("_id"))
        return cls.model_validate(data)


class Product(CatalogModel):
    """Product as stored and returned"""

    id: str
    name: str
    slug: str
    description: str
    category: Optional[str] = None
    specifications: Dict[str, str] = Field(default_factory=dict)
    applications: List[str] = Field(default_factory=list)
    # Older documents stored these as cloudinaryImages / isFeatured
    images: List[str] = Field(default_factory=list, validation_alias=AliasChoices("images", "cloudinaryImages"))
    featured: bool = Field(default=False, validation_alias=AliasChoices("featured", "isFeatured"))
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
