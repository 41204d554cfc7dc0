"""Provider assertion adapters.

The host's provider gateway performs the OAuth dance with Google, Apple,
etc. and hands the client a short-lived HS256 JWT whose ``iss`` names the
provider and whose ``sub`` is the provider's stable account id.
"""

import jwt
import logfire
from pydantic import ValidationError as PydanticValidationError

from jolt.adapter.error import ProviderError
from jolt.domain.service.provider_service import ProviderAdapter
from jolt.domain.value import ExternalProviderRef


def _to_ref(provider: str, subject: str) -> ExternalProviderRef:
    try:
        return ExternalProviderRef(f"{provider}:{subject}")
    except PydanticValidationError:
        raise ProviderError("Malformed provider reference")


class JWTAssertionProviderAdapter(ProviderAdapter):
    """Verifies gateway-signed provider assertions."""

    def __init__(self, secret: str, audience: str, algorithm: str = "HS256") -> None:
        """Initialize assertion adapter.

        Args:
            secret: Shared signing secret with the provider gateway
            audience: Expected ``aud`` claim
            algorithm: JWT signing algorithm
        """
        self.secret = secret
        self.audience = audience
        self.algorithm = algorithm

    async def resolve(self, assertion: str) -> ExternalProviderRef:
        """Verify the assertion and return ``<iss>:<sub>``."""
        try:
            claims = jwt.decode(
                assertion,
                self.secret,
                algorithms=[self.algorithm],
                audience=self.audience,
                options={"require": ["iss", "sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            logfire.warn("Provider assertion expired")
            raise ProviderError("Provider assertion has expired")
        except jwt.InvalidTokenError as e:
            logfire.warn("Provider assertion rejected", error=str(e))
            raise ProviderError("Invalid provider assertion")

        ref = _to_ref(str(claims["iss"]), str(claims["sub"]))
        logfire.info("Provider assertion verified", provider=ref.provider)
        return ref


class MockProviderAdapter(ProviderAdapter):
    """Mock adapter for testing: the assertion is the reference itself."""

    async def resolve(self, assertion: str) -> ExternalProviderRef:
        """Parse ``<provider>:<subject>``."""
        provider, sep, subject = assertion.partition(":")
        if not sep:
            raise ProviderError("Invalid provider assertion")
        return _to_ref(provider, subject)
