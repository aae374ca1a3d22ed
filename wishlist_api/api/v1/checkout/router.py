"""Checkout router: starts a hosted payment session for a booking"""

from fastapi import APIRouter, Depends

from wishlist_api.core.security import get_current_user
from wishlist_api.services.checkout_service import CheckoutService
from wishlist_api.schemas.checkout import CheckoutSessionCreate, CheckoutSessionResponse
from wishlist_api.utils.dependencies import get_checkout_service

router = APIRouter()

@router.post("", response_model=CheckoutSessionResponse)
async def create_checkout_session(
    booking: CheckoutSessionCreate,
    current_user: dict = Depends(get_current_user),
    service: CheckoutService = Depends(get_checkout_service)
):
    """Create a checkout session and return the URL to redirect to"""
    return await service.create_session(current_user["id"], booking)
