"""Models package initialization"""

from .base import Base
from .catalog import Listing, Experience, Service
from .wishlist import Wishlist, WishlistFolder, WishlistItem, ItemType

__all__ = [
    "Base",
    "Listing",
    "Experience",
    "Service",
    "Wishlist",
    "WishlistFolder",
    "WishlistItem",
    "ItemType",
]
