"""
Hero slide API endpoints
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile, status

from app.api.uploads import read_uploads
from app.core.config import config
from app.core.errors import ErrorResponseModel
from app.dependencies.auth import require_admin
from app.dependencies.services import get_hero_service, get_image_upload_service
from app.models.admin import AdminIdentity
from app.models.hero import HeroSlide
from app.schemas.common import MessageResponse, UploadedImageResponse
from app.schemas.hero import HeroSlideCreate, HeroSlideUpdate
from app.services.hero import HeroService
from app.services.image_upload import ImageUploadService

router = APIRouter()

ADMIN_RESPONSES = {
    400: {"model": ErrorResponseModel},
    401: {"model": ErrorResponseModel},
    403: {"model": ErrorResponseModel},
}


@router.get("", response_model=List[HeroSlide])
async def list_hero_slides(service: HeroService = Depends(get_hero_service)):
    """Active slides in ascending display order"""
    return await service.list_active()


@router.post(
    "/upload-image",
    response_model=UploadedImageResponse,
    responses={**ADMIN_RESPONSES, 413: {"model": ErrorResponseModel}, 500: {"model": ErrorResponseModel}},
)
async def upload_hero_image(
    admin: AdminIdentity = Depends(require_admin),
    image: Optional[UploadFile] = File(None),
    uploader: ImageUploadService = Depends(get_image_upload_service),
):
    uploads = await read_uploads(
        [image] if image is not None else [],
        max_size=uploader.max_file_size,
        max_files=1,
    )
    urls = await uploader.upload(uploads, folder=config.hero_image_folder, max_files=1)
    return UploadedImageResponse(url=urls[0])


@router.post(
    "",
    response_model=HeroSlide,
    status_code=status.HTTP_201_CREATED,
    responses=ADMIN_RESPONSES,
)
async def create_hero_slide(
    slide: HeroSlideCreate,
    admin: AdminIdentity = Depends(require_admin),
    service: HeroService = Depends(get_hero_service),
):
    """
    Create a slide. Without an explicit order it is placed after the last one.
    """
    return await service.create_slide(slide, created_by=admin.id)


@router.put(
    "/{slide_id}",
    response_model=HeroSlide,
    responses={**ADMIN_RESPONSES, 404: {"model": ErrorResponseModel}},
)
async def update_hero_slide(
    slide_id: str,
    slide: HeroSlideUpdate,
    admin: AdminIdentity = Depends(require_admin),
    service: HeroService = Depends(get_hero_service),
):
    return await service.update_slide(slide_id, slide, updated_by=admin.id)


@router.delete(
    "/{slide_id}",
    response_model=MessageResponse,
    responses={**ADMIN_RESPONSES, 404: {"model": ErrorResponseModel}},
)
async def delete_hero_slide(
    slide_id: str,
    admin: AdminIdentity = Depends(require_admin),
    service: HeroService = Depends(get_hero_service),
):
    await service.delete_slide(slide_id, deleted_by=admin.id)
    return MessageResponse(message="Hero slide deleted successfully")
