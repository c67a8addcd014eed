"""
Product service containing business logic layer
"""

from typing import List, Optional

from pydantic.alias_generators import to_camel

from app.core.errors import NotFound, ValidationError
from app.core.logger import logger
from app.models.product import Product
from app.repositories.product import ProductRepository
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.image_upload import ImageUploadService
from app.utils.slug import derive_slug


class ProductService:
    """Service layer for product business logic"""

    def __init__(self, repository: ProductRepository, images: ImageUploadService):
        self.repository = repository
        self.images = images

    async def list_products(self) -> List[Product]:
        """All products, newest first"""
        products = await self.repository.list_all()
        logger.debug(
            f"Fetched {len(products)} products",
            metadata={"event": "list_products", "count": len(products)}
        )
        return products

    async def get_product_by_slug(self, slug: str) -> Product:
        product = await self.repository.get_by_slug(slug)
        if not product:
            raise NotFound("Product not found")
        return product

    async def create_product(self, product_data: ProductCreate, created_by: Optional[str] = None) -> Product:
        """
        Create a product, deriving its slug from the name when none is given.

        Slug uniqueness is left to the unique index: a collision surfaces
        from the repository as DuplicateSlug.
        """
        slug = derive_slug(product_data.slug or "") or derive_slug(product_data.name)
        if not slug:
            raise ValidationError(
                "Unable to derive a slug from the product name",
                details={"errors": [{"field": "slug", "message": "must contain letters or digits", "type": "value_error"}]}
            )

        document = product_data.model_dump(by_alias=True)
        document["slug"] = slug

        product = await self.repository.create(document)

        logger.info(
            f"Created product {product.id}",
            metadata={"event": "create_product", "product_id": product.id, "slug": slug, "created_by": created_by}
        )
        return product

    async def update_product(self, product_id: str, product_data: ProductUpdate, updated_by: Optional[str] = None) -> Product:
        """Apply only the fields present in the request"""
        fields = product_data.provided_fields()

        # An existing slug is never re-derived; an explicit one is normalized
        if "slug" in fields:
            slug = derive_slug(fields["slug"])
            if slug:
                fields["slug"] = slug
            else:
                del fields["slug"]

        product = await self.repository.update(
            product_id, {to_camel(key): value for key, value in fields.items()}
        )
        if not product:
            raise NotFound("Product not found")

        logger.info(
            f"Updated product {product_id}",
            metadata={
                "event": "update_product",
                "product_id": product_id,
                "fields": sorted(fields),
                "updated_by": updated_by,
            }
        )
        return product

    async def delete_product(self, product_id: str, deleted_by: Optional[str] = None) -> None:
        """Delete a product after a best-effort cleanup of its images"""
        product = await self.repository.get_by_id(product_id)
        if not product:
            raise NotFound("Product not found")

        if product.images:
            removed = await self.images.delete_many(product.images)
            logger.info(
                f"Removed {removed} of {len(product.images)} images for product {product_id}",
                metadata={"event": "product_images_cleanup", "product_id": product_id}
            )

        if not await self.repository.delete(product_id):
            raise NotFound("Product not found")

        logger.info(
            f"Deleted product {product_id}",
            metadata={"event": "delete_product", "product_id": product_id, "deleted_by": deleted_by}
        )
