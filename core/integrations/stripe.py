"""Stripe Checkout integration for paid job posts."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional

import httpx

from core.config import Settings

logger = logging.getLogger(__name__)


class PaymentProviderError(Exception):
    """Raised when the payment provider rejects or fails a request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class StripeProduct:
    """A product sold through Checkout."""

    id: str
    price_id: str
    name: str
    description: str
    price: float
    currency: str
    mode: Literal["payment", "subscription"]


@dataclass(frozen=True)
class CheckoutSession:
    """Hosted checkout page created for one purchase."""

    id: str
    url: str


def build_products(config: Settings) -> List[StripeProduct]:
    """Product catalogue; the price reference comes from configuration."""
    return [
        StripeProduct(
            id="featured-job-post",
            price_id=config.stripe_featured_price_id,
            name="Featured Job Post",
            description="Featured job posting for 30 days",
            price=9.99,
            currency="AUD",
            mode="payment",
        ),
    ]


def get_product_by_id(products: List[StripeProduct], product_id: str) -> Optional[StripeProduct]:
    """Find a product by its catalogue id."""
    return next((p for p in products if p.id == product_id), None)


def get_product_by_price_id(products: List[StripeProduct], price_id: str) -> Optional[StripeProduct]:
    """Find a product by its provider price reference."""
    return next((p for p in products if p.price_id == price_id), None)


def checkout_return_urls(site_url: str) -> Dict[str, str]:
    """Where the provider sends the employer after paying or canceling."""
    origin = site_url.rstrip("/")
    return {
        "success_url": f"{origin}?success=true",
        "cancel_url": f"{origin}/post?canceled=true",
    }


class StripeClient:
    """
    Thin async client for the Checkout Sessions API.

    The underlying ``httpx.AsyncClient`` is owned by the instance and must be
    released with ``close()``.
    """

    def __init__(
        self,
        secret_key: Optional[str],
        api_base: str = "https://api.stripe.com",
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Stripe client.

        Args:
            secret_key: Stripe secret API key; checkout is disabled without one
            api_base: API base URL
            timeout: Request timeout in seconds
            transport: Optional transport override
        """
        self.secret_key = secret_key
        self._client = httpx.AsyncClient(
            base_url=api_base,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, config: Settings) -> "StripeClient":
        return cls(
            secret_key=config.stripe_secret_key,
            api_base=config.stripe_api_base,
            timeout=config.stripe_timeout,
        )

    @property
    def configured(self) -> bool:
        return bool(self.secret_key)

    async def create_checkout_session(
        self,
        price_id: str,
        success_url: str,
        cancel_url: str,
        mode: str = "payment",
        client_reference_id: Optional[str] = None,
        customer_email: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
    ) -> CheckoutSession:
        """
        Create a hosted checkout session.

        Returns:
            CheckoutSession with the redirect URL

        Raises:
            PaymentProviderError: If the provider is not configured, unreachable,
                or rejects the request
        """
        if not self.configured:
            raise PaymentProviderError("Payments are not configured")

        form: Dict[str, str] = {
            "line_items[0][price]": price_id,
            "line_items[0][quantity]": "1",
            "mode": mode,
            "success_url": success_url,
            "cancel_url": cancel_url,
        }
        if client_reference_id:
            form["client_reference_id"] = client_reference_id
        if customer_email:
            form["customer_email"] = customer_email
        for key, value in (metadata or {}).items():
            form[f"metadata[{key}]"] = value

        try:
            response = await self._client.post(
                "/v1/checkout/sessions",
                data=form,
                headers={"Authorization": f"Bearer {self.secret_key}"},
            )
        except httpx.HTTPError as e:
            logger.error(f"Checkout session request failed: {e}")
            raise PaymentProviderError("Payment provider unavailable") from e

        if response.status_code != 200:
            message = _error_message(response)
            logger.error(
                f"Checkout session rejected ({response.status_code}): {message}"
            )
            raise PaymentProviderError(message, status_code=response.status_code)

        data = response.json()
        if not data.get("url"):
            raise PaymentProviderError("Checkout session has no redirect URL")

        logger.info(f"Created checkout session: {data['id']}")
        return CheckoutSession(id=data["id"], url=data["url"])

    async def close(self) -> None:
        await self._client.aclose()


def _error_message(response: httpx.Response) -> str:
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return "Failed to create checkout session"
