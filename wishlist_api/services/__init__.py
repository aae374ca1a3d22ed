"""Services package"""

from .catalog import CatalogLookup, DatabaseCatalogLookup
from .checkout_service import CheckoutService
from .wishlist_service import WishlistService

__all__ = [
    "CatalogLookup",
    "DatabaseCatalogLookup",
    "CheckoutService",
    "WishlistService"
]
