"""External identity provider infrastructure providers."""

from dishka import Scope, provide

from jolt.adapter.provider import JWTAssertionProviderAdapter
from jolt.config import AuthSettings
from jolt.domain.service import ProviderAdapter
from jolt.util.di.base import ProviderBase


class IdentityProviderProvider(ProviderBase):
    """Identity provider component base."""

    __mock_component__ = "provider"


class ProdIdentityProviderProvider(IdentityProviderProvider):
    """Production provider adapter verifying gateway assertions."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_provider_adapter(self, auth_settings: AuthSettings) -> ProviderAdapter:
        """Provide provider assertion adapter."""
        return JWTAssertionProviderAdapter(
            secret=auth_settings.provider_assertion_secret,
            audience=auth_settings.provider_assertion_audience,
        )
