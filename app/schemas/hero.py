"""
API schemas for hero slide endpoints
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class HeroSlideCreate(BaseModel):
    """Schema for creating a hero slide; order defaults to the end of the list"""
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    image: str
    label: str = Field("", max_length=255)
    order: Optional[int] = None
    is_active: bool = True

    @field_validator("image")
    @classmethod
    def image_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value.strip()

    @field_validator("label", mode="before")
    @classmethod
    def default_label(cls, value):
        return "" if value is None else value

    @field_validator("is_active", mode="before")
    @classmethod
    def default_active(cls, value):
        return True if value is None else value


class HeroSlideUpdate(BaseModel):
    """Schema for a sparse hero slide update"""
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    image: Optional[str] = None
    label: Optional[str] = Field(None, max_length=255)
    order: Optional[int] = None
    is_active: Optional[bool] = None

    @field_validator("image")
    @classmethod
    def image_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("must not be empty")
        return value.strip() if value is not None else value

    def provided_fields(self) -> Dict[str, Any]:
        """Fields explicitly present and non-null in the request"""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }
