"""API v1 routes aggregation"""

from fastapi import APIRouter

from .wishlist.router import router as wishlist_router
from .checkout.router import router as checkout_router

# Create v1 router
api_router = APIRouter()

# Include all routers
api_router.include_router(wishlist_router, prefix="/wishlist", tags=["Wishlist"])
api_router.include_router(checkout_router, prefix="/checkout", tags=["Checkout"])

# Export router
router = api_router
