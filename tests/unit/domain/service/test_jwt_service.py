"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from jolt.config import AuthSettings
from jolt.domain.model import Identity
from jolt.domain.service import JWTService
from jolt.domain.value import Handle, IdentityId
from jolt.util.jwt import JWTError

SECRET = "test-secret-0123456789abcdef0123456789"


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(AuthSettings(jwt_secret=SECRET))


@pytest.fixture
def identity() -> Identity:
    return Identity(id=IdentityId(uuid4()), handle=Handle("SwiftTiger42"))


class TestJWTService:
    """Tests for session token creation and verification."""

    def test_round_trip(self, jwt_service, identity):
        payload = jwt_service.verify_token(jwt_service.create_token(identity))

        assert payload.identity_id == str(identity.id)
        assert payload.handle == "SwiftTiger42"
        assert payload.kind == "anonymous"
        assert payload.exp > datetime.now(timezone.utc)

    def test_rejects_foreign_signature(self, jwt_service, identity):
        other = JWTService(AuthSettings(jwt_secret="another-secret-0123456789abcdef"))

        with pytest.raises(JWTError):
            jwt_service.verify_token(other.create_token(identity))

    def test_rejects_expired(self, jwt_service, identity):
        token = jwt.encode(
            {
                "sub": str(identity.id),
                "handle": "SwiftTiger42",
                "kind": "anonymous",
                "iat": datetime.now(timezone.utc) - timedelta(days=31),
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)

    def test_rejects_token_without_subject(self, jwt_service):
        token = jwt.encode(
            {
                "handle": "SwiftTiger42",
                "kind": "anonymous",
                "iat": datetime.now(timezone.utc),
                "exp": datetime.now(timezone.utc) + timedelta(days=1),
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="Invalid"):
            jwt_service.verify_token(token)
