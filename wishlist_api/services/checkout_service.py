"""
Checkout session client
Hands a booking over to the hosted payment provider and returns its redirect URL
"""

from typing import Any, Dict, Optional
import httpx
import logging

from wishlist_api.core.config import settings
from wishlist_api.core.exceptions import CheckoutError
from wishlist_api.schemas.checkout import CheckoutSessionCreate, CheckoutSessionResponse

logger = logging.getLogger(__name__)

class CheckoutService:
    """Thin wrapper around the payment provider's create-session endpoint"""

    def __init__(
        self,
        provider_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.provider_url = provider_url or settings.CHECKOUT_PROVIDER_URL
        self.api_key = api_key if api_key is not None else settings.CHECKOUT_PROVIDER_API_KEY
        self.timeout = timeout or settings.CHECKOUT_TIMEOUT_SECONDS
        self.transport = transport

    async def create_session(self, user_id: str, request: CheckoutSessionCreate) -> CheckoutSessionResponse:
        """
        Open a checkout session for a booking

        Args:
            user_id: Authenticated user ID, passed along as client reference
            request: Validated booking summary

        Returns:
            URL of the hosted payment page

        Raises:
            CheckoutError: If the provider is unreachable or answers without a URL
        """
        payload: Dict[str, Any] = request.model_dump(mode="json", by_alias=True)
        payload["clientReferenceId"] = user_id

        headers = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.provider_url, json=payload, headers=headers)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Checkout provider returned {e.response.status_code} for listing {request.listing}")
            raise CheckoutError()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Checkout provider request failed: {e}")
            raise CheckoutError()

        checkout_url = None
        if isinstance(data, dict):
            checkout_url = data.get("checkoutUrl") or data.get("url")
        if not checkout_url:
            logger.error("Checkout provider response has no checkout URL")
            raise CheckoutError()

        logger.info(f"Checkout session opened for user {user_id}, listing {request.listing}")
        return CheckoutSessionResponse(checkout_url=checkout_url)
