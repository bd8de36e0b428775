"""Infrastructure providers.

ProdPersistenceProvider must be imported here so that it shows up in
PersistenceProvider.__subclasses__().
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
