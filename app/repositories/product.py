"""
Product repository for data access layer following Repository pattern
"""

from typing import Any, Dict, List, Optional

from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError

from app.core.errors import DuplicateSlug
from app.models.product import Product
from app.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """Repository for product data access operations"""

    model_class = Product

    def _duplicate_key_error(self, error: DuplicateKeyError) -> DuplicateSlug:
        # slug carries the only unique index on products
        return DuplicateSlug()

    async def list_all(self) -> List[Product]:
        """All products, newest first"""
        return await self.find_many({}, sort=[("createdAt", DESCENDING)])

    async def get_by_slug(self, slug: str) -> Optional[Product]:
        return await self.find_one({"slug": slug})

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        return await self.find_by_id(product_id)

    async def create(self, document: Dict[str, Any]) -> Product:
        """Insert a product; a slug collision raises DuplicateSlug"""
        return await self.insert(document)

    async def update(self, product_id: str, fields: Dict[str, Any]) -> Optional[Product]:
        return await self.update_fields(product_id, fields)

    async def delete(self, product_id: str) -> bool:
        return await self.delete_by_id(product_id)
