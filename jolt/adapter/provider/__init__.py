"""External identity provider adapters."""

from .assertion import JWTAssertionProviderAdapter, MockProviderAdapter

__all__ = ["JWTAssertionProviderAdapter", "MockProviderAdapter"]
