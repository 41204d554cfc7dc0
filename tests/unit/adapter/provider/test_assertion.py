"""Unit tests for provider assertion adapters."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from jolt.adapter.error import ProviderError
from jolt.adapter.provider import JWTAssertionProviderAdapter, MockProviderAdapter
from jolt.domain.service import ProviderAdapter

SECRET = "gateway-secret-0123456789abcdef012345"
AUDIENCE = "jolt-identity"


def make_assertion(secret: str = SECRET, **overrides) -> str:
    claims = {
        "iss": "google",
        "sub": "10769150350006150715113082367",
        "aud": AUDIENCE,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
    }
    claims.update(overrides)
    claims = {k: v for k, v in claims.items() if v is not None}
    return jwt.encode(claims, secret, algorithm="HS256")


@pytest.fixture
def adapter() -> JWTAssertionProviderAdapter:
    return JWTAssertionProviderAdapter(secret=SECRET, audience=AUDIENCE)


class TestJWTAssertionProviderAdapter:
    """Tests for gateway-signed assertions."""

    @pytest.mark.asyncio
    async def test_resolves_issuer_and_subject(self, adapter):
        ref = await adapter.resolve(make_assertion())

        assert ref.root == "google:10769150350006150715113082367"
        assert ref.provider == "google"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "assertion",
        [
            make_assertion(secret="wrong-secret-0123456789abcdef0123456"),
            make_assertion(aud="someone-else"),
            make_assertion(exp=datetime.now(timezone.utc) - timedelta(minutes=1)),
            make_assertion(sub=None),
            make_assertion(iss=None),
            "not-a-jwt",
        ],
    )
    async def test_rejects_untrusted(self, adapter, assertion):
        with pytest.raises(ProviderError):
            await adapter.resolve(assertion)


class TestMockProviderAdapter:
    """Tests for the mock adapter used in tests and local development."""

    @pytest.mark.asyncio
    async def test_parses_reference(self):
        ref = await MockProviderAdapter().resolve("apple:42")

        assert ref.root == "apple:42"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("assertion", ["no-colon", ":42", "apple:"])
    async def test_rejects_malformed(self, assertion):
        with pytest.raises(ProviderError):
            await MockProviderAdapter().resolve(assertion)


class TestProviderAdapterPort:
    """Tests for the adapter contract."""

    def test_port_is_abstract(self):
        with pytest.raises(TypeError):
            ProviderAdapter()

    def test_adapters_implement_port(self, adapter):
        assert isinstance(adapter, ProviderAdapter)
        assert isinstance(MockProviderAdapter(), ProviderAdapter)
