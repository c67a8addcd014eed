"""
External service clients
"""

from .object_storage import S3ObjectStorage

__all__ = ["S3ObjectStorage"]
