"""External identity provider boundary."""

from abc import ABC, abstractmethod

from jolt.domain.value import ExternalProviderRef


class ProviderAdapter(ABC):
    """Turns a provider-issued assertion into a trusted provider reference.

    The interactive login with the provider happens outside this service;
    the host hands us only a signed assertion of the outcome.
    """

    @abstractmethod
    async def resolve(self, assertion: str) -> ExternalProviderRef:
        """Validate an assertion and extract the provider reference.

        Args:
            assertion: Opaque provider assertion supplied by the client

        Returns:
            External provider reference (``<provider>:<subject>``)

        Raises:
            ProviderError: If the assertion is invalid or expired
        """
        pass
