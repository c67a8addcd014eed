"""
API schemas for Product endpoints following FastAPI best practices
"""

from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Fields that may be cleared with an explicit null on update
NULLABLE_UPDATE_FIELDS = {"category"}


def _not_blank(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError("must not be empty")
    return value


def _coerce_specifications(value: Any) -> Any:
    if value is None:
        return {}
    if isinstance(value, dict):
        return {str(k): "" if v is None else str(v) for k, v in value.items()}
    return value


def _clean_strings(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, list):
        return [item.strip() for item in value if isinstance(item, str) and item.strip()]
    return value


class ProductWriteModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class ProductCreate(ProductWriteModel):
    """Schema for creating a new product"""
    name: str = Field(..., max_length=255)
    slug: Optional[str] = Field(None, max_length=255)
    description: str
    category: Optional[str] = Field(None, max_length=100)

    specifications: Dict[str, str] = Field(default_factory=dict)
    applications: List[str] = Field(default_factory=list)

    # Media and flags, also accepted under their legacy names
    images: List[str] = Field(default_factory=list, validation_alias=AliasChoices("images", "cloudinaryImages"))
    featured: bool = Field(False, validation_alias=AliasChoices("featured", "isFeatured"))

    @field_validator("name", "description")
    @classmethod
    def required_text(cls, value: str) -> str:
        return _not_blank(value)

    @field_validator("name", "category")
    @classmethod
    def trim(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else value

    @field_validator("specifications", mode="before")
    @classmethod
    def coerce_specifications(cls, value):
        return _coerce_specifications(value)

    @field_validator("applications", "images", mode="before")
    @classmethod
    def clean_lists(cls, value):
        return _clean_strings(value)

    @field_validator("featured", mode="before")
    @classmethod
    def default_featured(cls, value):
        return False if value is None else value


class ProductUpdate(ProductWriteModel):
    """Schema for a sparse product update; unset fields are left untouched"""
    name: Optional[str] = Field(None, max_length=255)
    slug: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    category: Optional[str] = Field(None, max_length=100)

    specifications: Optional[Dict[str, str]] = None
    applications: Optional[List[str]] = None

    images: Optional[List[str]] = Field(None, validation_alias=AliasChoices("images", "cloudinaryImages"))
    featured: Optional[bool] = Field(None, validation_alias=AliasChoices("featured", "isFeatured"))

    @field_validator("name", "description")
    @classmethod
    def required_text(cls, value: Optional[str]) -> Optional[str]:
        return _not_blank(value)

    @field_validator("name", "category")
    @classmethod
    def trim(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else value

    @field_validator("specifications", mode="before")
    @classmethod
    def coerce_specifications(cls, value):
        return None if value is None else _coerce_specifications(value)

    @field_validator("applications", "images", mode="before")
    @classmethod
    def clean_lists(cls, value):
        return None if value is None else _clean_strings(value)

    def provided_fields(self) -> Dict[str, Any]:
        """Fields explicitly present in the request, keyed by field name"""
        fields = self.model_dump(exclude_unset=True)
        return {
            key: value
            for key, value in fields.items()
            if value is not None or key in NULLABLE_UPDATE_FIELDS
        }
