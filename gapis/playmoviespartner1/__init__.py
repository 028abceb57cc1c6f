"""Play Movies Partner v1."""
from .api import AccountMethods, PlayMovies, Scope
from .schemas import Avail, ListAvailsResponse, ListOrdersResponse, ListStoreInfosResponse, Order, StoreInfo

__all__ = [
    "AccountMethods", "PlayMovies", "Scope",
    "Avail", "ListAvailsResponse", "ListOrdersResponse", "ListStoreInfosResponse", "Order", "StoreInfo",
]
