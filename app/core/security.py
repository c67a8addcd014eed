"""
Credential primitives: JWT issuance/verification and password hashing
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext

from app.core.config import Config, config as default_config
from app.core.errors import InvalidCredential, ServerMisconfigured
from app.core.logger import logger
from app.models.admin import ADMIN_ROLE, AdminIdentity

# bcrypt, constant-time verification
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Check a password against a stored hash.

    With no hash to compare against, a dummy verification still runs so the
    call takes as long as a real one.
    """
    if not hashed_password:
        pwd_context.dummy_verify()
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Malformed or unknown hash format
        return False


class TokenService:
    """Issues and verifies signed, time-limited admin tokens"""

    def __init__(self, secret: Optional[str], algorithm: str = "HS256", expires_in: timedelta = timedelta(days=7)):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    @classmethod
    def from_config(cls, settings: Config = default_config) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expires_in=timedelta(days=settings.jwt_expiration_days),
        )

    def _require_secret(self) -> str:
        if not self.secret:
            logger.error("JWT secret is not configured", metadata={"event": "jwt_secret_missing"})
            raise ServerMisconfigured("JWT secret is not configured on the server")
        return self.secret

    def issue(self, admin_id: str, role: str = ADMIN_ROLE) -> str:
        secret = self._require_secret()
        now = datetime.now(timezone.utc)
        payload = {
            "adminId": admin_id,
            "role": role,
            "iat": now,
            "exp": now + self.expires_in,
        }
        return jwt.encode(payload, secret, algorithm=self.algorithm)

    def verify(self, token: Optional[str]) -> AdminIdentity:
        """
        Decode and validate a token

        Raises:
            ServerMisconfigured: no signing secret
            InvalidCredential: empty, malformed, expired or badly signed token
        """
        secret = self._require_secret()

        if not token:
            raise InvalidCredential()

        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self.algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise InvalidCredential("Token has expired")
        except jwt.InvalidTokenError as e:
            logger.warning("Invalid token", metadata={"event": "jwt_invalid", "reason": str(e)})
            raise InvalidCredential()

        admin_id = payload.get("adminId")
        if not admin_id or not isinstance(admin_id, str):
            logger.warning("Invalid token: missing admin identifier", metadata={"event": "jwt_invalid"})
            raise InvalidCredential()

        return AdminIdentity(id=admin_id, role=payload.get("role"))
