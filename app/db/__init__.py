"""
Database module initialization
"""

from .mongodb import (
    ADMINS_COLLECTION,
    HERO_COLLECTION,
    PRODUCTS_COLLECTION,
    MongoConnectionManager,
)

__all__ = [
    "ADMINS_COLLECTION",
    "HERO_COLLECTION",
    "PRODUCTS_COLLECTION",
    "MongoConnectionManager",
]
