"""Tests for token verification and the authentication dependencies"""
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.core.errors import (
    Forbidden,
    InvalidCredential,
    MissingCredential,
    ServerMisconfigured,
)
from app.core.security import TokenService, hash_password, verify_password
from app.dependencies.auth import authenticate, require_admin
from app.models.admin import AdminIdentity

SECRET = "another-test-secret-with-enough-length"
ADMIN_ID = "507f1f77bcf86cd799439033"


@pytest.fixture
def tokens():
    return TokenService(secret=SECRET)


class TestTokenService:

    def test_issue_and_verify(self, tokens):
        identity = tokens.verify(tokens.issue(ADMIN_ID))

        assert identity.id == ADMIN_ID
        assert identity.is_admin is True

    def test_token_claims(self, tokens):
        payload = jwt.decode(tokens.issue(ADMIN_ID), SECRET, algorithms=["HS256"])

        assert payload["adminId"] == ADMIN_ID
        assert payload["role"] == "admin"
        assert payload["exp"] - payload["iat"] == int(timedelta(days=7).total_seconds())

    def test_expired_token(self, tokens):
        past = datetime.now(timezone.utc) - timedelta(days=8)
        token = jwt.encode(
            {"adminId": ADMIN_ID, "role": "admin", "iat": past, "exp": past + timedelta(days=7)},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidCredential):
            tokens.verify(token)

    def test_wrong_signature(self, tokens):
        forged = TokenService(secret="some-other-secret-entirely-different").issue(ADMIN_ID)
        with pytest.raises(InvalidCredential):
            tokens.verify(forged)

    def test_garbage_token(self, tokens):
        with pytest.raises(InvalidCredential):
            tokens.verify("not.a.jwt")

    def test_missing_admin_id(self, tokens):
        token = jwt.encode(
            {"role": "admin", "exp": datetime.now(timezone.utc) + timedelta(hours=1)}, SECRET, algorithm="HS256"
        )
        with pytest.raises(InvalidCredential):
            tokens.verify(token)

    def test_missing_expiry(self, tokens):
        token = jwt.encode({"adminId": ADMIN_ID, "role": "admin"}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidCredential):
            tokens.verify(token)

    def test_no_secret(self):
        with pytest.raises(ServerMisconfigured) as exc_info:
            TokenService(secret=None).verify("anything")
        assert exc_info.value.status_code == 500

        with pytest.raises(ServerMisconfigured):
            TokenService(secret="").issue(ADMIN_ID)


class TestPasswords:

    def test_hash_and_verify(self):
        hashed = hash_password("admin123")
        assert hashed != "admin123"
        assert verify_password("admin123", hashed) is True
        assert verify_password("wrong", hashed) is False

    def test_verify_without_hash(self):
        assert verify_password("admin123", None) is False

    def test_verify_malformed_hash(self):
        assert verify_password("admin123", "plaintext-not-a-hash") is False


class TestAuthenticate:

    def test_valid_bearer(self, tokens):
        identity = authenticate(f"Bearer {tokens.issue(ADMIN_ID)}", tokens)
        assert identity.id == ADMIN_ID

    @pytest.mark.parametrize("header", [None, "", "   ", "Basic abc123"])
    def test_missing_credential(self, tokens, header):
        with pytest.raises(MissingCredential) as exc_info:
            authenticate(header, tokens)
        assert exc_info.value.status_code == 401

    @pytest.mark.parametrize("header", ["Bearer not-a-token", "Bearer", "Bearer   "])
    def test_invalid_credential(self, tokens, header):
        with pytest.raises(InvalidCredential) as exc_info:
            authenticate(header, tokens)
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_require_admin_rejects_other_roles(self):
        with pytest.raises(Forbidden) as exc_info:
            await require_admin(AdminIdentity(id=ADMIN_ID, role="editor"))
        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_require_admin_rejects_non_admin_token(self, tokens):
        token = tokens.issue(ADMIN_ID, role="viewer")
        identity = authenticate(f"Bearer {token}", tokens)

        with pytest.raises(Forbidden):
            await require_admin(identity)

    @pytest.mark.asyncio
    async def test_require_admin_passes_admin(self):
        identity = AdminIdentity(id=ADMIN_ID, role="admin")
        assert await require_admin(identity) is identity
