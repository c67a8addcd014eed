"""
API module initialization
"""

from . import auth, health, hero, products

__all__ = ["auth", "health", "hero", "products"]
