from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from autolink.domain.listing import Listing

CHECKOUT_CURRENCY = "usd"
DEFAULT_CHECKOUT_IMAGE = "/images/general/default-checkout.png"
DEFAULT_CHECKOUT_DESCRIPTION = "No description available."


@dataclass(frozen=True, slots=True)
class CheckoutItem:
    """The projection of a listing that is sent to the payment provider."""

    id: str
    make: str
    model: str
    price: Decimal | None
    image_url: str | None = None
    description: str | None = None

    @classmethod
    def from_listing(cls, listing: Listing) -> CheckoutItem:
        return cls(
            id=listing.id,
            make=listing.make,
            model=listing.model,
            price=listing.price,
            image_url=listing.image_url,
            description=listing.description,
        )


@dataclass(frozen=True, slots=True)
class CheckoutSessionRequest:
    """A single-item hosted checkout session, ready for the provider."""

    name: str
    description: str
    image_urls: tuple[str, ...]
    unit_amount: int  # smallest currency unit (cents)
    success_url: str
    cancel_url: str
    currency: str = CHECKOUT_CURRENCY
    quantity: int = 1
    metadata: dict[str, str] = field(default_factory=dict)


def to_cents(price: Decimal) -> int:
    return int((price * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def absolute_url(app_url: str, path_or_url: str) -> str:
    if path_or_url.startswith(("http://", "https://")):
        return path_or_url
    return f"{app_url.rstrip('/')}/{path_or_url.lstrip('/')}"


class CheckoutFailure(Enum):
    CONFIGURATION = "configuration"
    INVALID_INPUT = "invalid_input"
    PROVIDER = "provider"


@dataclass(frozen=True, slots=True)
class CheckoutResult:
    """
    Either a session id or an error message, never both.

    failure classifies the error for logging and status codes; callers
    that only look at the message still get the same shape for every kind.
    """

    session_id: str | None = None
    error: str | None = None
    failure: CheckoutFailure | None = None

    def __post_init__(self) -> None:
        if (self.session_id is None) == (self.error is None):
            raise ValueError("CheckoutResult needs exactly one of session_id or error")

    @property
    def ok(self) -> bool:
        return self.session_id is not None

    @classmethod
    def success(cls, session_id: str) -> CheckoutResult:
        return cls(session_id=session_id)

    @classmethod
    def failed(cls, failure: CheckoutFailure, error: str) -> CheckoutResult:
        return cls(error=error, failure=failure)
