"""
Hero slide service containing business logic layer
"""

from typing import List, Optional

from pydantic.alias_generators import to_camel

from app.core.errors import NotFound
from app.core.logger import logger
from app.models.hero import HeroSlide
from app.repositories.hero import HeroRepository
from app.schemas.hero import HeroSlideCreate, HeroSlideUpdate
from app.services.image_upload import ImageUploadService


class HeroService:
    """Service layer for homepage hero slides"""

    def __init__(self, repository: HeroRepository, images: ImageUploadService):
        self.repository = repository
        self.images = images

    async def list_active(self) -> List[HeroSlide]:
        return await self.repository.list_active()

    async def create_slide(self, slide_data: HeroSlideCreate, created_by: Optional[str] = None) -> HeroSlide:
        """Create a slide; without an explicit order it goes after the current last one"""
        order = slide_data.order
        if order is None:
            max_order = await self.repository.max_order()
            order = max_order + 1 if max_order is not None else 0

        document = slide_data.model_dump(by_alias=True)
        document["order"] = order

        slide = await self.repository.create(document)

        logger.info(
            f"Created hero slide {slide.id}",
            metadata={"event": "create_hero_slide", "slide_id": slide.id, "order": order, "created_by": created_by}
        )
        return slide

    async def update_slide(self, slide_id: str, slide_data: HeroSlideUpdate, updated_by: Optional[str] = None) -> HeroSlide:
        fields = slide_data.provided_fields()

        slide = await self.repository.update(slide_id, {to_camel(key): value for key, value in fields.items()})
        if not slide:
            raise NotFound("Hero slide not found")

        logger.info(
            f"Updated hero slide {slide_id}",
            metadata={"event": "update_hero_slide", "slide_id": slide_id, "fields": sorted(fields), "updated_by": updated_by}
        )
        return slide

    async def delete_slide(self, slide_id: str, deleted_by: Optional[str] = None) -> None:
        """Delete a slide after a best-effort cleanup of its image"""
        slide = await self.repository.get_by_id(slide_id)
        if not slide:
            raise NotFound("Hero slide not found")

        if slide.image:
            await self.images.delete_by_url(slide.image)

        if not await self.repository.delete(slide_id):
            raise NotFound("Hero slide not found")

        logger.info(
            f"Deleted hero slide {slide_id}",
            metadata={"event": "delete_hero_slide", "slide_id": slide_id, "deleted_by": deleted_by}
        )
