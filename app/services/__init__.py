"""
Services module initialization
"""

from .auth import AuthService
from .hero import HeroService
from .image_upload import ImageUploadService, UploadedFile
from .product import ProductService

__all__ = [
    "AuthService",
    "HeroService",
    "ImageUploadService",
    "UploadedFile",
    "ProductService",
]
