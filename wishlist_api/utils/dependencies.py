"""
Common dependencies for FastAPI
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from wishlist_api.core.database import get_db
from wishlist_api.services.catalog import CatalogLookup, DatabaseCatalogLookup
from wishlist_api.services.checkout_service import CheckoutService
from wishlist_api.services.wishlist_service import WishlistService

def get_catalog_lookup(db: AsyncSession = Depends(get_db)) -> CatalogLookup:
    """Catalog lookup sharing the request's database session"""
    return DatabaseCatalogLookup(db)

def get_wishlist_service(
    db: AsyncSession = Depends(get_db),
    catalog: CatalogLookup = Depends(get_catalog_lookup)
) -> WishlistService:
    return WishlistService(db, catalog)

def get_checkout_service() -> CheckoutService:
    return CheckoutService()
