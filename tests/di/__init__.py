"""Mock providers for testing.

Importing this package registers the mock implementations as subclasses
of the component providers, which is how ``get_provider`` finds them.
"""

from .container import build_test_container
from .persistence import MockPersistenceProvider
from .provider import MockIdentityProviderProvider

__all__ = [
    "MockIdentityProviderProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
