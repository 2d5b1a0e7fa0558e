"""Stripe hosted-checkout implementation of PaymentGateway."""

from __future__ import annotations

import logging
from typing import Any

import stripe

from autolink.domain.checkout import CheckoutSessionRequest
from autolink.domain.errors import ExternalServiceError
from autolink.ports.payment_gateway import PaymentGateway

logger = logging.getLogger(__name__)

SERVICE_NAME = "stripe"


class PaymentProviderError(ExternalServiceError):
    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(SERVICE_NAME, message, **context)


def build_session_params(request: CheckoutSessionRequest) -> dict[str, Any]:
    """Translate a checkout session request into Stripe's create-session params."""
    return {
        "payment_method_types": ["card"],
        "line_items": [
            {
                "price_data": {
                    "currency": request.currency,
                    "product_data": {
                        "name": request.name,
                        "description": request.description,
                        "images": list(request.image_urls),
                    },
                    "unit_amount": request.unit_amount,
                },
                "quantity": request.quantity,
            }
        ],
        "mode": "payment",
        "success_url": request.success_url,
        "cancel_url": request.cancel_url,
        "metadata": dict(request.metadata),
    }


class StripePaymentGateway(PaymentGateway):
    """
    Creates Stripe Checkout sessions.

    - One StripeClient per gateway (no global api_key mutation)
    - No network retries; a timeout surfaces as PaymentProviderError
    """

    def __init__(
        self,
        secret_key: str,
        timeout_seconds: float = 10,
        client: stripe.StripeClient | None = None,
    ) -> None:
        if not secret_key and client is None:
            raise ValueError("Stripe secret key is required")

        self._client = client or stripe.StripeClient(
            secret_key,
            http_client=stripe.RequestsClient(timeout=timeout_seconds),
            max_network_retries=0,
        )

    def create_session(self, request: CheckoutSessionRequest) -> str:
        params = build_session_params(request)

        try:
            session = self._client.checkout.sessions.create(params=params)
        except stripe.StripeError as e:
            logger.warning(
                "Stripe checkout session creation failed",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            raise PaymentProviderError(f"Failed to create payment session: {e}") from e

        if not getattr(session, "id", None):
            raise PaymentProviderError("Failed to initialize payment session.")

        return session.id
