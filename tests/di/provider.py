"""Mock identity provider adapters for testing."""

from dishka import Scope, provide

from jolt.adapter.provider import MockProviderAdapter
from jolt.domain.service import ProviderAdapter
from jolt.util.di.infrastructure.provider import IdentityProviderProvider


class MockIdentityProviderProvider(IdentityProviderProvider):
    """Mock provider whose assertions are plain ``provider:subject`` strings."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_provider_adapter(self) -> ProviderAdapter:
        """Provide mock provider adapter."""
        return MockProviderAdapter()
