"""
Authentication dependencies for FastAPI
Provides bearer token validation and admin extraction
"""

from typing import Optional

from fastapi import Depends, Header

from app.core.config import config
from app.core.errors import Forbidden, MissingCredential
from app.core.logger import logger
from app.core.security import TokenService
from app.models.admin import AdminIdentity


def get_token_service() -> TokenService:
    return TokenService.from_config(config)


def authenticate(authorization: Optional[str], tokens: TokenService) -> AdminIdentity:
    """
    Verify an Authorization header value.

    Raises:
        MissingCredential: no header or not a Bearer header
        InvalidCredential: empty token or failed verification
        ServerMisconfigured: no signing secret configured
    """
    if not authorization:
        logger.warning("Authentication required: No token provided")
        raise MissingCredential()

    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        logger.warning("Authentication required: Expected 'Bearer <token>'")
        raise MissingCredential()

    identity = tokens.verify(token.strip())
    logger.debug(f"Authentication successful for admin: {identity.id}")
    return identity


async def get_current_admin(
    authorization: Optional[str] = Header(None),
    tokens: TokenService = Depends(get_token_service),
) -> AdminIdentity:
    """
    Dependency to extract and validate the caller from the bearer token.

    Usage:
        @router.get("/verify")
        async def verify(identity: AdminIdentity = Depends(get_current_admin)):
            ...
    """
    return authenticate(authorization, tokens)


async def require_admin(identity: AdminIdentity = Depends(get_current_admin)) -> AdminIdentity:
    """
    Dependency to require the admin capability.

    Usage:
        @router.delete("/{id}")
        async def delete_item(admin: AdminIdentity = Depends(require_admin)):
            ...
    """
    if not identity.is_admin:
        logger.warning(f"Admin access denied for: {identity.id}")
        raise Forbidden()
    return identity
