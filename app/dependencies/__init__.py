"""
Dependencies module initialization
"""

from .auth import authenticate, get_current_admin, get_token_service, require_admin
from .services import (
    get_auth_service,
    get_connection_manager,
    get_database,
    get_hero_service,
    get_image_upload_service,
    get_object_storage,
    get_product_service,
)

__all__ = [
    "authenticate",
    "get_current_admin",
    "get_token_service",
    "require_admin",
    "get_auth_service",
    "get_connection_manager",
    "get_database",
    "get_hero_service",
    "get_image_upload_service",
    "get_object_storage",
    "get_product_service",
]
