"""Infrastructure providers.

Implementations are imported here so ``get_provider`` can find them through
``__subclasses__()``.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider
from .provider import IdentityProviderProvider, ProdIdentityProviderProvider

__all__ = [
    "IdentityProviderProvider",
    "PersistenceProvider",
    "ProdIdentityProviderProvider",
    "ProdPersistenceProvider",
]
