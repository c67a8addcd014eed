"""
Utility helpers
"""

from .slug import derive_slug
from .object_id import parse_object_id

__all__ = ["derive_slug", "parse_object_id"]
