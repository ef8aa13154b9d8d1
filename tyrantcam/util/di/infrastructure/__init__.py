"""Infrastructure providers.

ProdPersistenceProvider is imported so that it is registered as a subclass
of PersistenceProvider before the container is assembled.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
