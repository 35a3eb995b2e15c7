"""
Tests for the Stripe Checkout client.

The provider is replaced with ``httpx.MockTransport``; no network access.
"""

from urllib.parse import parse_qs

import httpx
import pytest

from core.config import settings
from core.integrations.stripe import (
    CheckoutSession,
    PaymentProviderError,
    StripeClient,
    build_products,
    checkout_return_urls,
    get_product_by_id,
    get_product_by_price_id,
)


def make_client(handler, secret_key="sk_test_123"):
    return StripeClient(
        secret_key=secret_key,
        api_base="https://stripe.test",
        transport=httpx.MockTransport(handler),
    )


async def create(client, **kwargs):
    params = {
        "price_id": "price_abc",
        "success_url": "https://jobs.example?success=true",
        "cancel_url": "https://jobs.example/post?canceled=true",
    }
    params.update(kwargs)
    return await client.create_checkout_session(**params)


class TestProducts:
    """Test the product catalogue."""

    def test_featured_product(self):
        """Test the featured post product."""
        products = build_products(settings)
        product = get_product_by_id(products, "featured-job-post")

        assert product.price == 9.99
        assert product.currency == "AUD"
        assert product.mode == "payment"
        assert product.price_id == settings.stripe_featured_price_id

    def test_lookup_by_price_id(self):
        """Test products resolve from the provider price reference."""
        products = build_products(settings)

        assert get_product_by_price_id(products, settings.stripe_featured_price_id).id == "featured-job-post"
        assert get_product_by_price_id(products, "price_unknown") is None

    def test_unknown_product(self):
        """Test unknown ids return None."""
        assert get_product_by_id(build_products(settings), "gold") is None


class TestReturnUrls:
    """Test checkout return URLs."""

    @pytest.mark.parametrize("site_url", ["https://jobs.example", "https://jobs.example/"])
    def test_return_urls(self, site_url):
        """Test success and cancel URLs are built from the site origin."""
        assert checkout_return_urls(site_url) == {
            "success_url": "https://jobs.example?success=true",
            "cancel_url": "https://jobs.example/post?canceled=true",
        }


class TestCreateCheckoutSession:
    """Test checkout session creation."""

    @pytest.mark.asyncio
    async def test_success(self):
        """Test a session is created with the expected form fields."""
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["method"] = request.method
            captured["path"] = request.url.path
            captured["auth"] = request.headers["authorization"]
            captured["form"] = parse_qs(request.content.decode())
            return httpx.Response(200, json={"id": "cs_test_1", "url": "https://checkout.test/cs_test_1"})

        client = make_client(handler)
        session = await create(
            client,
            client_reference_id="job-1",
            customer_email="hr@example.com",
            metadata={"job_id": "job-1"},
        )
        await client.close()

        assert session == CheckoutSession(id="cs_test_1", url="https://checkout.test/cs_test_1")
        assert captured["method"] == "POST"
        assert captured["path"] == "/v1/checkout/sessions"
        assert captured["auth"] == "Bearer sk_test_123"
        form = captured["form"]
        assert form["line_items[0][price]"] == ["price_abc"]
        assert form["line_items[0][quantity]"] == ["1"]
        assert form["mode"] == ["payment"]
        assert form["client_reference_id"] == ["job-1"]
        assert form["customer_email"] == ["hr@example.com"]
        assert form["metadata[job_id]"] == ["job-1"]

    @pytest.mark.asyncio
    async def test_optional_fields_omitted(self):
        """Test unset optional fields are not sent."""
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["form"] = parse_qs(request.content.decode())
            return httpx.Response(200, json={"id": "cs_1", "url": "https://checkout.test/cs_1"})

        client = make_client(handler)
        await create(client)
        await client.close()

        assert "client_reference_id" not in captured["form"]
        assert "customer_email" not in captured["form"]

    @pytest.mark.asyncio
    async def test_not_configured(self):
        """Test checkout fails fast without a secret key."""
        def handler(request):
            raise AssertionError("provider should not be called")

        client = make_client(handler, secret_key=None)

        assert client.configured is False
        with pytest.raises(PaymentProviderError) as exc_info:
            await create(client)
        assert "not configured" in str(exc_info.value)
        await client.close()

    @pytest.mark.asyncio
    async def test_provider_rejects(self):
        """Test the provider's error message is surfaced."""
        def handler(request):
            return httpx.Response(400, json={"error": {"message": "No such price: 'price_abc'"}})

        client = make_client(handler)
        with pytest.raises(PaymentProviderError) as exc_info:
            await create(client)
        await client.close()

        assert str(exc_info.value) == "No such price: 'price_abc'"
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_provider_error_without_body(self):
        """Test a generic message when the error body is unreadable."""
        def handler(request):
            return httpx.Response(500, text="upstream failure")

        client = make_client(handler)
        with pytest.raises(PaymentProviderError) as exc_info:
            await create(client)
        await client.close()

        assert str(exc_info.value) == "Failed to create checkout session"

    @pytest.mark.asyncio
    async def test_provider_unreachable(self):
        """Test transport failures become provider errors."""
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)
        with pytest.raises(PaymentProviderError) as exc_info:
            await create(client)
        await client.close()

        assert str(exc_info.value) == "Payment provider unavailable"

    @pytest.mark.asyncio
    async def test_missing_redirect_url(self):
        """Test a session without a URL is an error."""
        def handler(request):
            return httpx.Response(200, json={"id": "cs_1", "url": None})

        client = make_client(handler)
        with pytest.raises(PaymentProviderError):
            await create(client)
        await client.close()
