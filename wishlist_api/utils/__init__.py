"""Utilities package"""

from .dependencies import get_catalog_lookup, get_wishlist_service, get_checkout_service

__all__ = [
    "get_catalog_lookup",
    "get_wishlist_service",
    "get_checkout_service"
]
