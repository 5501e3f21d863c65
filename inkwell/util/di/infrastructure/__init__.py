"""Infrastructure provider slots.

Implementations are imported here so that ``__subclasses__()`` sees them
when containers are built.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
