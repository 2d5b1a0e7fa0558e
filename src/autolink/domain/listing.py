from __future__ import annotations

import logging
import random
import string
import time
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from autolink.domain.errors import ValidationError

logger = logging.getLogger(__name__)


# Used when a submission has no photo or the photo could not be written
DEFAULT_LISTING_IMAGE = "/images/cars/default-new-listing.png"
# Largest amount the payment provider accepts for one item (in dollars)
MAX_LISTING_PRICE = Decimal("99999999.99")


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


class Condition(str, Enum):
    NEW = "new"
    USED_LIKE_NEW = "used - like new"
    USED_GOOD = "used - good"
    USED_FAIR = "used - fair"
    USED_POOR = "used - poor"

    @classmethod
    def parse(cls, value: str | None) -> Condition | None:
        """Exact (case-insensitive) match against the wire values, None otherwise."""
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    @classmethod
    def from_text(cls, text: str | None) -> Condition:
        """
        Map a free-text condition onto one of the five supported values.

        Keyword containment, checked in order: "like new", "good", "fair",
        "poor", then "new". Anything else is treated as used - good.
        """
        lowered = (text or "").lower()
        if "like new" in lowered:
            return cls.USED_LIKE_NEW
        if "good" in lowered:
            return cls.USED_GOOD
        if "fair" in lowered:
            return cls.USED_FAIR
        if "poor" in lowered:
            return cls.USED_POOR
        if "new" in lowered:
            return cls.NEW
        return cls.USED_GOOD


@dataclass(frozen=True)
class Listing:
    id: str
    make: str
    model: str
    year: int
    price: Decimal | None
    mileage: int
    condition: Condition
    description: str
    image_url: str
    photos: tuple[str, ...] = ()
    featured: bool = False
    additional_details: str | None = None
    engine: str | None = None
    transmission: str | None = None
    fuel_type: str | None = None
    exterior_color: str | None = None
    interior_color: str | None = None
    vin: str | None = None

    @property
    def display_photos(self) -> tuple[str, ...]:
        """Photos to show on the detail page; falls back to the primary image."""
        return self.photos or (self.image_url,)

    @property
    def is_checkout_eligible(self) -> bool:
        return is_chargeable_price(self.price)


def is_chargeable_price(price: Decimal | None) -> bool:
    return price is not None and price.is_finite() and 0 < price <= MAX_LISTING_PRICE


def generate_listing_id() -> str:
    """
    Listing identifier: epoch milliseconds plus a 7 character base36 suffix.

    Practically unique, not cryptographically unique. The store rejects a
    collision with ConflictError instead of overwriting.
    """
    alphabet = string.digits + string.ascii_lowercase
    suffix = "".join(random.choices(alphabet, k=7))
    return f"{int(time.time() * 1000)}-{suffix}"


def _parse_year(raw: str | int | None) -> int | None:
    if raw is None or isinstance(raw, int):
        return raw
    text = raw.strip()
    if not text:
        return None
    try:
        return int(text, 10)
    except ValueError:
        logger.debug("Ignoring malformed year bound", extra={"value": raw})
        return None


def _parse_price(raw: str | Decimal | None) -> Decimal | None:
    if raw is None or isinstance(raw, Decimal):
        return raw
    text = raw.strip()
    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        logger.debug("Ignoring malformed price bound", extra={"value": raw})
        return None
    if not value.is_finite():
        logger.debug("Ignoring non-finite price bound", extra={"value": raw})
        return None
    return value


def _clean_text(raw: str | None) -> str | None:
    if raw is None:
        return None
    text = raw.strip()
    return text or None


@dataclass(frozen=True, slots=True)
class ListingFilters:
    """
    Sparse filter criteria. A field set to None places no constraint.

    All present fields are combined with AND semantics.
    """

    make: str | None = None
    model: str | None = None
    year_min: int | None = None
    year_max: int | None = None
    price_min: Decimal | None = None
    price_max: Decimal | None = None
    featured: bool | None = None

    @classmethod
    def from_raw(
        cls,
        *,
        make: str | None = None,
        model: str | None = None,
        year_min: str | int | None = None,
        year_max: str | int | None = None,
        price_min: str | Decimal | None = None,
        price_max: str | Decimal | None = None,
        featured: bool | None = None,
    ) -> ListingFilters:
        """
        Build filters from loosely typed input (query strings, form state).

        Empty strings become None. Bounds that do not parse are dropped
        rather than rejected, so a bad bound never breaks browsing.
        Price bounds keep their fractional part.
        """
        return cls(
            make=_clean_text(make),
            model=_clean_text(model),
            year_min=_parse_year(year_min),
            year_max=_parse_year(year_max),
            price_min=_parse_price(price_min),
            price_max=_parse_price(price_max),
            featured=featured,
        )

    @property
    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (
                self.make,
                self.model,
                self.year_min,
                self.year_max,
                self.price_min,
                self.price_max,
                self.featured,
            )
        )

    def validate(self) -> None:
        """
        Guard the types that cross into the filter engine.

        Raises:
            FilterValidationError: If a price bound is not a Decimal
        """
        # Guardrails: prevent float leakage past boundary
        if self.price_min is not None and not isinstance(self.price_min, Decimal):
            raise FilterValidationError(
                "price_min must be Decimal or None (no floats past the boundary)"
            )
        if self.price_max is not None and not isinstance(self.price_max, Decimal):
            raise FilterValidationError(
                "price_max must be Decimal or None (no floats past the boundary)"
            )
