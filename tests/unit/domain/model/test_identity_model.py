"""Unit tests for the Identity aggregate."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from jolt.domain.model import Identity
from jolt.domain.value import (
    ExternalProviderRef,
    Handle,
    IdentityId,
    IdentityKind,
    IdentityRole,
)


def make_identity(**overrides) -> Identity:
    fields = {"id": IdentityId(uuid4()), "handle": Handle("SwiftTiger42")}
    fields.update(overrides)
    return Identity(**fields)


class TestIdentity:
    """Tests for identity invariants."""

    def test_defaults_to_anonymous_member(self):
        identity = make_identity()

        assert identity.kind == IdentityKind.ANONYMOUS
        assert identity.role == IdentityRole.MEMBER
        assert identity.is_anonymous
        assert (identity.points, identity.level, identity.switch_count) == (0, 1, 0)

    def test_registered_requires_provider_ref(self):
        with pytest.raises(ValidationError):
            make_identity(kind=IdentityKind.REGISTERED)

    def test_anonymous_rejects_provider_ref(self):
        with pytest.raises(ValidationError):
            make_identity(external_provider_ref=ExternalProviderRef("google:1"))

    def test_registered_with_provider_ref(self):
        identity = make_identity(
            kind=IdentityKind.REGISTERED,
            external_provider_ref=ExternalProviderRef("google:1"),
        )

        assert not identity.is_anonymous

    @pytest.mark.parametrize(
        "overrides", [{"points": -1}, {"level": -1}, {"switch_count": -3}]
    )
    def test_rejects_invalid_counters(self, overrides):
        with pytest.raises(ValidationError):
            make_identity(**overrides)

    def test_counters_accept_zero(self):
        identity = make_identity(points=0, level=0, switch_count=0)

        assert identity.level == 0

    def test_has_role(self):
        identity = make_identity(role=IdentityRole.MODERATOR)

        assert identity.has_role(IdentityRole.MODERATOR, IdentityRole.ADMIN)
        assert not identity.has_role(IdentityRole.ADMIN)
