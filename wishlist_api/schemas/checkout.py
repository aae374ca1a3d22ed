"""
Checkout session schemas
"""

from pydantic import Field, model_validator
from datetime import date
from decimal import Decimal

from .wishlist import CamelModel

class CheckoutSessionCreate(CamelModel):
    """Booking summary sent by the booking widget"""
    listing: str = Field(..., min_length=1, max_length=64, description="Listing ID")
    check_in_date: date
    check_out_date: date
    guests_count: int = Field(..., ge=1, le=50)
    total_price: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)

    @model_validator(mode="after")
    def check_dates(self):
        if self.check_out_date <= self.check_in_date:
            raise ValueError("checkOutDate must be after checkInDate")
        return self

class CheckoutSessionResponse(CamelModel):
    """Hosted payment page to redirect the browser to"""
    checkout_url: str
