"""
Product API endpoints
Public catalog reads plus admin-only writes and image upload
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile, status

from app.api.uploads import read_uploads
from app.core.config import config
from app.core.errors import ErrorResponseModel
from app.dependencies.auth import require_admin
from app.dependencies.services import get_image_upload_service, get_product_service
from app.models.admin import AdminIdentity
from app.models.product import Product
from app.schemas.common import MessageResponse, UploadedImagesResponse
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.image_upload import ImageUploadService
from app.services.product import ProductService

router = APIRouter()

ADMIN_RESPONSES = {
    400: {"model": ErrorResponseModel},
    401: {"model": ErrorResponseModel},
    403: {"model": ErrorResponseModel},
}


@router.get("", response_model=List[Product])
async def list_products(service: ProductService = Depends(get_product_service)):
    """
    List every product, newest first.
    """
    return await service.list_products()


@router.post(
    "/upload-images",
    response_model=UploadedImagesResponse,
    responses={**ADMIN_RESPONSES, 413: {"model": ErrorResponseModel}, 500: {"model": ErrorResponseModel}},
)
async def upload_product_images(
    admin: AdminIdentity = Depends(require_admin),
    images: Optional[List[UploadFile]] = File(None),
    uploader: ImageUploadService = Depends(get_image_upload_service),
):
    """
    Upload up to the configured number of product images.
    Returns the public URLs in the order the files were sent.
    """
    uploads = await read_uploads(
        images,
        max_size=uploader.max_file_size,
        max_files=config.max_product_images,
    )
    urls = await uploader.upload(
        uploads,
        folder=config.products_image_folder,
        max_files=config.max_product_images,
    )
    return UploadedImagesResponse(urls=urls)


@router.get(
    "/{slug}",
    response_model=Product,
    responses={404: {"model": ErrorResponseModel}},
)
async def get_product(slug: str, service: ProductService = Depends(get_product_service)):
    """
    Get a product by its slug.
    """
    return await service.get_product_by_slug(slug)


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    responses=ADMIN_RESPONSES,
)
async def create_product(
    product: ProductCreate,
    admin: AdminIdentity = Depends(require_admin),
    service: ProductService = Depends(get_product_service),
):
    """
    Create a product. The slug is derived from the name unless one is given.
    Requires admin authentication.
    """
    return await service.create_product(product, created_by=admin.id)


@router.put(
    "/{product_id}",
    response_model=Product,
    responses={**ADMIN_RESPONSES, 404: {"model": ErrorResponseModel}},
)
async def update_product(
    product_id: str,
    product: ProductUpdate,
    admin: AdminIdentity = Depends(require_admin),
    service: ProductService = Depends(get_product_service),
):
    """
    Update only the fields present in the request body.
    Requires admin authentication.
    """
    return await service.update_product(product_id, product, updated_by=admin.id)


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    responses={**ADMIN_RESPONSES, 404: {"model": ErrorResponseModel}},
)
async def delete_product(
    product_id: str,
    admin: AdminIdentity = Depends(require_admin),
    service: ProductService = Depends(get_product_service),
):
    """
    Delete a product. Its images are removed from storage on a best-effort basis.
    Requires admin authentication.
    """
    await service.delete_product(product_id, deleted_by=admin.id)
    return MessageResponse(message="Product deleted successfully")
