"""
Hero slide repository
"""

from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING

from app.models.hero import HeroSlide
from app.repositories.base import BaseRepository


class HeroRepository(BaseRepository[HeroSlide]):
    """Repository for hero slide data access operations"""

    model_class = HeroSlide

    async def list_active(self) -> List[HeroSlide]:
        """Active slides in display order"""
        return await self.find_many({"isActive": True}, sort=[("order", ASCENDING)])

    async def max_order(self) -> Optional[int]:
        """Highest order across all slides, active or not; None when empty"""
        slide = await self.find_one({}, sort=[("order", DESCENDING)])
        return slide.order if slide else None

    async def get_by_id(self, slide_id: str) -> Optional[HeroSlide]:
        return await self.find_by_id(slide_id)

    async def create(self, document: Dict[str, Any]) -> HeroSlide:
        return await self.insert(document)

    async def update(self, slide_id: str, fields: Dict[str, Any]) -> Optional[HeroSlide]:
        return await self.update_fields(slide_id, fields)

    async def delete(self, slide_id: str) -> bool:
        return await self.delete_by_id(slide_id)
