"""
API schemas
"""

from .auth import AdminSummary, LoginRequest, LoginResponse, VerifyResponse
from .common import MessageResponse, UploadedImageResponse, UploadedImagesResponse
from .hero import HeroSlideCreate, HeroSlideUpdate
from .product import ProductCreate, ProductUpdate

__all__ = [
    "AdminSummary",
    "LoginRequest",
    "LoginResponse",
    "VerifyResponse",
    "MessageResponse",
    "UploadedImageResponse",
    "UploadedImagesResponse",
    "HeroSlideCreate",
    "HeroSlideUpdate",
    "ProductCreate",
    "ProductUpdate",
]
