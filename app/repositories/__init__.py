"""
Repositories module initialization
"""

from .admin import AdminRepository
from .base import BaseRepository
from .hero import HeroRepository
from .product import ProductRepository

__all__ = [
    "AdminRepository",
    "BaseRepository",
    "HeroRepository",
    "ProductRepository",
]
