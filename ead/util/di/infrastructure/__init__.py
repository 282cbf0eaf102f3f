"""Infrastructure providers: the backend gateway and the notes store."""

from .ead_api import EadApiProvider, ProdEadApiProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "EadApiProvider",
    "PersistenceProvider",
    "ProdEadApiProvider",
    "ProdPersistenceProvider",
]
