"""
Hero slide model
"""

from datetime import datetime

from pydantic import Field

from app.models.product import CatalogModel, utc_now


class HeroSlide(CatalogModel):
    """Homepage hero slide; displayed in ascending order"""

    id: str
    image: str
    label: str = ""
    order: int = 0
    is_active: bool = True
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
