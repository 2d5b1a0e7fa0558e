from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import quote

from autolink.domain.checkout import (
    DEFAULT_CHECKOUT_DESCRIPTION,
    DEFAULT_CHECKOUT_IMAGE,
    CheckoutFailure,
    CheckoutItem,
    CheckoutResult,
    CheckoutSessionRequest,
    absolute_url,
    to_cents,
)
from autolink.domain.errors import ExternalServiceError
from autolink.domain.listing import is_chargeable_price
from autolink.ports.payment_gateway import PaymentGateway

logger = logging.getLogger(__name__)

PAYMENTS_NOT_CONFIGURED = (
    "Payment processing is currently unavailable because Stripe is not configured "
    "on the server."
)
APP_URL_MISSING = "Payment processing is temporarily unavailable. Application URL is missing."
ITEM_MISSING = "Car details are missing for checkout."
INVALID_PRICE = "Invalid car price for checkout."


@dataclass(frozen=True, slots=True)
class CreateCheckoutSessionRequest:
    item: CheckoutItem | None


class CreateCheckoutSession:
    """
    Obtain a hosted checkout session for one listing.

    Preconditions are checked in order and short-circuit before any
    provider call: gateway configured, app URL known, item present,
    price above zero and within the provider limit. Every failure is
    returned as CheckoutResult.error; nothing is raised to the caller.
    """

    def __init__(self, payment_gateway: PaymentGateway | None, app_url: str | None) -> None:
        self._payment_gateway = payment_gateway
        self._app_url = (app_url or "").rstrip("/")

    def execute(self, request: CreateCheckoutSessionRequest) -> CheckoutResult:
        if self._payment_gateway is None:
            logger.error("Checkout requested but payments are not configured")
            return CheckoutResult.failed(CheckoutFailure.CONFIGURATION, PAYMENTS_NOT_CONFIGURED)
        if not self._app_url:
            logger.error("Checkout requested but APP_URL is not configured")
            return CheckoutResult.failed(CheckoutFailure.CONFIGURATION, APP_URL_MISSING)

        item = request.item
        if item is None:
            return CheckoutResult.failed(CheckoutFailure.INVALID_INPUT, ITEM_MISSING)
        if not is_chargeable_price(item.price):
            logger.info(
                "Checkout rejected for invalid price",
                extra={"listing_id": item.id, "price": str(item.price)},
            )
            return CheckoutResult.failed(CheckoutFailure.INVALID_INPUT, INVALID_PRICE)

        session_request = self._build_session_request(item)

        try:
            session_id = self._payment_gateway.create_session(session_request)
        except ExternalServiceError as exc:
            return CheckoutResult.failed(CheckoutFailure.PROVIDER, exc.message)

        logger.info("Checkout session created", extra={"listing_id": item.id})
        return CheckoutResult.success(session_id)

    def _build_session_request(self, item: CheckoutItem) -> CheckoutSessionRequest:
        image = absolute_url(self._app_url, item.image_url or DEFAULT_CHECKOUT_IMAGE)
        return CheckoutSessionRequest(
            name=f"{item.make} {item.model}",
            description=item.description or DEFAULT_CHECKOUT_DESCRIPTION,
            image_urls=(image,),
            unit_amount=to_cents(item.price),  # type: ignore[arg-type]
            success_url=f"{self._app_url}/payment/success?session_id={{CHECKOUT_SESSION_ID}}",
            cancel_url=f"{self._app_url}/payment/cancel?car_id={quote(item.id, safe='')}",
            metadata={"carId": item.id},
        )
