"""
Models module initialization
"""

from .admin import Admin, AdminIdentity, AdminPublic
from .hero import HeroSlide
from .product import CatalogModel, Product

__all__ = [
    "Admin",
    "AdminIdentity",
    "AdminPublic",
    "CatalogModel",
    "HeroSlide",
    "Product",
]
