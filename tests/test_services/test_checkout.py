"""Tests for CheckoutService."""

import json
from datetime import date
from decimal import Decimal

import httpx
import pytest
from pydantic import ValidationError as PydanticValidationError

from wishlist_api.core.exceptions import CheckoutError
from wishlist_api.schemas.checkout import CheckoutSessionCreate
from wishlist_api.services.checkout_service import CheckoutService

PROVIDER_URL = "https://payments.test/checkout/sessions"


@pytest.fixture
def booking():
    return CheckoutSessionCreate(
        listing="L1",
        check_in_date=date(2025, 7, 1),
        check_out_date=date(2025, 7, 4),
        guests_count=2,
        total_price=Decimal("450.00"),
    )


def make_service(handler, api_key=None):
    return CheckoutService(
        provider_url=PROVIDER_URL,
        api_key=api_key,
        transport=httpx.MockTransport(handler),
    )


class TestCreateSession:
    """Tests for opening checkout sessions."""

    async def test_returns_checkout_url(self, booking):
        """Test the provider's URL is passed back."""
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json={"checkoutUrl": "https://pay.test/s/abc"})

        result = await make_service(handler, api_key="sk_test").create_session("user-1", booking)

        assert result.checkout_url == "https://pay.test/s/abc"
        assert seen["url"] == PROVIDER_URL
        assert seen["auth"] == "Bearer sk_test"
        assert seen["body"] == {
            "listing": "L1",
            "checkInDate": "2025-07-01",
            "checkOutDate": "2025-07-04",
            "guestsCount": 2,
            "totalPrice": "450.00",
            "clientReferenceId": "user-1",
        }

    async def test_accepts_plain_url_field(self, booking):
        """Test providers answering with 'url' are supported."""
        service = make_service(lambda request: httpx.Response(200, json={"url": "https://pay.test/x"}))

        result = await service.create_session("user-1", booking)

        assert result.checkout_url == "https://pay.test/x"

    async def test_provider_error_status(self, booking):
        """Test a non-2xx answer is a checkout failure."""
        service = make_service(lambda request: httpx.Response(500, json={"error": "boom"}))

        with pytest.raises(CheckoutError):
            await service.create_session("user-1", booking)

    async def test_provider_unreachable(self, booking):
        """Test transport errors are a checkout failure."""

        def handler(request):
            raise httpx.ConnectError("connection refused")

        with pytest.raises(CheckoutError):
            await make_service(handler).create_session("user-1", booking)

    async def test_missing_url(self, booking):
        """Test an answer without a URL is a checkout failure."""
        service = make_service(lambda request: httpx.Response(200, json={"id": "cs_1"}))

        with pytest.raises(CheckoutError):
            await service.create_session("user-1", booking)

    async def test_non_json_answer(self, booking):
        """Test a body that is not JSON is a checkout failure."""
        service = make_service(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(CheckoutError):
            await service.create_session("user-1", booking)


class TestCheckoutSchema:
    """Tests for booking validation."""

    def test_accepts_camel_case(self):
        """Test the widget's camelCase payload parses."""
        booking = CheckoutSessionCreate.model_validate({
            "listing": "L1",
            "checkInDate": "2025-07-01",
            "checkOutDate": "2025-07-02",
            "guestsCount": 1,
            "totalPrice": 99.5,
        })

        assert booking.guests_count == 1
        assert booking.total_price == Decimal("99.5")

    def test_check_out_must_follow_check_in(self):
        """Test reversed or equal dates are rejected."""
        with pytest.raises(PydanticValidationError):
            CheckoutSessionCreate(
                listing="L1",
                check_in_date=date(2025, 7, 4),
                check_out_date=date(2025, 7, 4),
                guests_count=1,
                total_price=Decimal("10"),
            )

    @pytest.mark.parametrize("field,value", [("guests_count", 0), ("total_price", Decimal("0"))])
    def test_positive_amounts(self, field, value):
        """Test guests and price must be positive."""
        data = dict(
            listing="L1",
            check_in_date=date(2025, 7, 1),
            check_out_date=date(2025, 7, 2),
            guests_count=1,
            total_price=Decimal("10"),
        )
        data[field] = value

        with pytest.raises(PydanticValidationError):
            CheckoutSessionCreate(**data)
