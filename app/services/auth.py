"""
Admin authentication service
"""

import asyncio

from app.core.errors import InvalidCredential
from app.core.logger import logger
from app.core.security import TokenService, verify_password
from app.models.admin import AdminIdentity, AdminPublic
from app.repositories.admin import AdminRepository
from app.schemas.auth import AdminSummary, LoginRequest, LoginResponse

# Same message for unknown email and wrong password
INVALID_LOGIN_MESSAGE = "Invalid credentials"


class AuthService:
    """Login and session verification for admins"""

    def __init__(self, repository: AdminRepository, tokens: TokenService):
        self.repository = repository
        self.tokens = tokens

    async def login(self, credentials: LoginRequest) -> LoginResponse:
        """
        Exchange email and password for a bearer token.

        Unknown email and wrong password are indistinguishable to the caller.
        """
        admin = await self.repository.get_by_email(credentials.email)

        # bcrypt is CPU bound; keep it off the event loop
        password_ok = await asyncio.to_thread(
            verify_password, credentials.password, admin.password_hash if admin else None
        )

        if not admin or not password_ok:
            logger.warning("Failed admin login", metadata={"event": "login_failed"})
            raise InvalidCredential(INVALID_LOGIN_MESSAGE)

        token = self.tokens.issue(admin.id)

        logger.info("Admin logged in", metadata={"event": "login_success", "admin_id": admin.id})
        return LoginResponse(token=token, admin=AdminSummary(id=admin.id, email=admin.email))

    async def get_admin(self, identity: AdminIdentity) -> AdminPublic:
        """Resolve a verified identity to its admin record, without the password"""
        admin = await self.repository.get_by_id(identity.id)
        if not admin:
            logger.warning(
                "Token refers to a missing admin",
                metadata={"event": "verify_admin_missing", "admin_id": identity.id}
            )
            raise InvalidCredential()
        return admin.to_public()
