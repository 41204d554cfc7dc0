"""Unit tests for request-level identity dependencies."""

from typing import Annotated
from uuid import uuid4

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from jolt.domain.model import Identity
from jolt.domain.value import Handle, IdentityId, IdentityRole
from jolt.interface.api.deps import get_current_identity, require_role
from jolt.interface.error import register_error_handlers


def build_client(caller: Identity | None) -> TestClient:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/moderation")
    async def moderation(
        identity: Annotated[
            Identity, Depends(require_role(IdentityRole.MODERATOR, IdentityRole.ADMIN))
        ],
    ):
        return {"handle": identity.handle.root}

    if caller is not None:
        app.dependency_overrides[get_current_identity] = lambda: caller
    return TestClient(app)


def make_identity(role: IdentityRole) -> Identity:
    return Identity(id=IdentityId(uuid4()), handle=Handle("SwiftTiger42"), role=role)


class TestRequireRole:
    """Tests for require_role."""

    @pytest.mark.parametrize("role", [IdentityRole.MODERATOR, IdentityRole.ADMIN])
    def test_allowed(self, role):
        response = build_client(make_identity(role)).get("/moderation")

        assert response.status_code == 200
        assert response.json() == {"handle": "SwiftTiger42"}

    def test_forbidden(self):
        response = build_client(make_identity(IdentityRole.MEMBER)).get("/moderation")

        assert response.status_code == 403
        assert response.json()["error"] == "forbidden"

    def test_without_session(self):
        response = build_client(None).get("/moderation")

        assert response.status_code == 401
        assert response.json()["error"] == "unauthenticated"
