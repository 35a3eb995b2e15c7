"""
Tests for payment endpoints.

Tests:
- Product catalogue
- Checkout session creation
- Latest order lookup
"""

from unittest.mock import AsyncMock, patch

from core.integrations.stripe import CheckoutSession, PaymentProviderError


class TestProducts:
    """Test GET /api/v1/payments/products."""

    def test_list_products(self, client):
        """Test the featured post product is listed."""
        response = client.get("/api/v1/payments/products")

        assert response.status_code == 200
        product = response.json()["items"][0]
        assert product["id"] == "featured-job-post"
        assert product["price"] == 9.99
        assert product["currency"] == "AUD"
        assert product["mode"] == "payment"


class TestCheckout:
    """Test POST /api/v1/payments/checkout."""

    def test_create_checkout(self, auth_client, stripe_client):
        """Test a checkout session is created for a job."""
        stripe_client.create_checkout_session.return_value = CheckoutSession(
            id="cs_test_2", url="https://checkout.test/cs_test_2"
        )

        response = auth_client.post("/api/v1/payments/checkout", json={"job_id": "job-1"})

        assert response.status_code == 200
        assert response.json() == {"session_id": "cs_test_2", "url": "https://checkout.test/cs_test_2"}
        kwargs = stripe_client.create_checkout_session.await_args.kwargs
        assert kwargs["client_reference_id"] == "job-1"
        assert kwargs["metadata"] == {"job_id": "job-1"}
        assert kwargs["customer_email"] == "hr@blacktownhospital.example"

    def test_checkout_without_job(self, auth_client, stripe_client):
        """Test the account id is the reference when no job is given."""
        stripe_client.create_checkout_session.return_value = CheckoutSession(id="cs", url="https://c.test")

        auth_client.post("/api/v1/payments/checkout", json={})

        kwargs = stripe_client.create_checkout_session.await_args.kwargs
        assert kwargs["client_reference_id"] == "employer-1"
        assert kwargs["metadata"] is None

    def test_unknown_product(self, auth_client, stripe_client):
        """Test unknown products return 404."""
        response = auth_client.post("/api/v1/payments/checkout", json={"product_id": "gold"})

        assert response.status_code == 404
        stripe_client.create_checkout_session.assert_not_awaited()

    def test_provider_failure(self, auth_client, stripe_client):
        """Test provider failures return 502 with the message."""
        stripe_client.create_checkout_session.side_effect = PaymentProviderError(
            "Payments are not configured"
        )

        response = auth_client.post("/api/v1/payments/checkout", json={"job_id": "job-1"})

        assert response.status_code == 502
        assert response.json()["error"]["message"] == "Payments are not configured"

    def test_requires_sign_in(self, client):
        """Test anonymous checkout is rejected."""
        assert client.post("/api/v1/payments/checkout", json={}).status_code == 401


class TestLatestOrder:
    """Test GET /api/v1/payments/orders/latest."""

    def test_latest_order(self, auth_client):
        """Test the most recent order is returned for the success page."""
        order = {
            "order_id": 7,
            "checkout_session_id": "cs_test_2",
            "payment_intent_id": "pi_1",
            "job_id": "job-1",
            "amount_subtotal": 999,
            "amount_total": 999,
            "currency": "aud",
            "amount_display": "A$9.99",
            "payment_status": "paid",
            "order_status": "completed",
            "order_date": "2026-10-19T09:05:00+00:00",
            "order_date_display": "19 October 2026, 09:05 am",
        }
        with patch("api.services.orders.latest_order", new=AsyncMock(return_value=order)) as mock_latest:
            response = auth_client.get("/api/v1/payments/orders/latest")

        assert response.status_code == 200
        assert response.json()["amount_display"] == "A$9.99"
        assert mock_latest.await_args.args[1] == "employer-1"

    def test_no_orders(self, auth_client):
        """Test accounts without orders get 404."""
        with patch("api.services.orders.latest_order", new=AsyncMock(return_value=None)):
            response = auth_client.get("/api/v1/payments/orders/latest")

        assert response.status_code == 404
