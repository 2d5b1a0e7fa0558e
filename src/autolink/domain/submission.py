"""Listing submission: raw form input, per-field rules and normalisation."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from autolink.domain.errors import ValidationError
from autolink.domain.listing import MAX_LISTING_PRICE, Condition, Listing

MIN_YEAR = 1900
MIN_DESCRIPTION_LENGTH = 10
MAX_PHOTO_BYTES = 5 * 1024 * 1024
ALLOWED_PHOTO_CONTENT_TYPES = frozenset({"image/jpeg", "image/png", "image/webp"})

DETAIL_FIELDS = (
    "make",
    "model",
    "year",
    "mileage",
    "condition",
    "description",
    "price",
)
PHOTO_FIELDS = ("photo",)
ALL_FIELDS = DETAIL_FIELDS + PHOTO_FIELDS

OPTIONAL_TEXT_FIELDS = (
    "additional_details",
    "engine",
    "transmission",
    "fuel_type",
    "exterior_color",
    "interior_color",
    "vin",
)


@dataclass(frozen=True, slots=True)
class PhotoUpload:
    filename: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True, slots=True)
class ListingSubmission:
    """
    Raw submission as typed into the sell form.

    Every value is kept as text until normalisation so the same object can
    back a partially filled form.
    """

    make: str | None = None
    model: str | None = None
    year: str | None = None
    price: str | None = None
    mileage: str | None = None
    condition: str | None = None
    description: str | None = None
    additional_details: str | None = None
    engine: str | None = None
    transmission: str | None = None
    fuel_type: str | None = None
    exterior_color: str | None = None
    interior_color: str | None = None
    vin: str | None = None
    featured: str | None = None
    photo: PhotoUpload | None = None

    def with_changes(self, **changes: Any) -> ListingSubmission:
        return replace(self, **changes)


@dataclass(frozen=True, slots=True)
class NormalizedSubmission:
    """Submission values after every rule passed."""

    make: str
    model: str
    year: int
    price: Decimal
    mileage: int
    condition: Condition
    description: str
    featured: bool = False
    additional_details: str | None = None
    engine: str | None = None
    transmission: str | None = None
    fuel_type: str | None = None
    exterior_color: str | None = None
    interior_color: str | None = None
    vin: str | None = None

    def to_listing(self, listing_id: str, image_url: str) -> Listing:
        return Listing(
            id=listing_id,
            make=self.make,
            model=self.model,
            year=self.year,
            price=self.price,
            mileage=self.mileage,
            condition=self.condition,
            description=self.description,
            image_url=image_url,
            photos=(image_url,),
            featured=self.featured,
            additional_details=self.additional_details,
            engine=self.engine,
            transmission=self.transmission,
            fuel_type=self.fuel_type,
            exterior_color=self.exterior_color,
            interior_color=self.interior_color,
            vin=self.vin,
        )


# ==============================================================================
# Field rules
# ==============================================================================


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _error(field: str, message: str, code: str) -> dict[str, str]:
    return {"field": field, "message": message, "code": code}


def _parse_int(value: str) -> int | None:
    try:
        return int(value.strip(), 10)
    except ValueError:
        return None


def _parse_decimal(value: str) -> Decimal | None:
    try:
        parsed = Decimal(value.strip())
    except InvalidOperation:
        return None
    return parsed if parsed.is_finite() else None


def _check_make(submission: ListingSubmission, final: bool, today: date) -> dict[str, str] | None:
    if _blank(submission.make):
        return _error("make", "Make is required", "REQUIRED")
    return None


def _check_model(submission: ListingSubmission, final: bool, today: date) -> dict[str, str] | None:
    if _blank(submission.model):
        return _error("model", "Model is required", "REQUIRED")
    return None


def _check_year(submission: ListingSubmission, final: bool, today: date) -> dict[str, str] | None:
    if _blank(submission.year):
        return _error("year", "Year is required", "REQUIRED")
    year = _parse_int(submission.year)  # type: ignore[arg-type]
    if year is None or not MIN_YEAR <= year <= today.year + 1:
        return _error(
            "year", f"Year must be between {MIN_YEAR} and {today.year + 1}", "INVALID_YEAR"
        )
    return None


def _check_mileage(
    submission: ListingSubmission, final: bool, today: date
) -> dict[str, str] | None:
    if _blank(submission.mileage):
        # The details step lets mileage stay empty; the final check does not.
        if final:
            return _error("mileage", "Mileage is required", "REQUIRED")
        return None
    mileage = _parse_int(submission.mileage)  # type: ignore[arg-type]
    if mileage is None:
        return _error("mileage", "Mileage must be a whole number", "INVALID_NUMBER")
    if mileage < 0:
        return _error("mileage", "Mileage cannot be negative", "INVALID_VALUE")
    return None


def _check_condition(
    submission: ListingSubmission, final: bool, today: date
) -> dict[str, str] | None:
    if _blank(submission.condition):
        return _error("condition", "Condition is required", "REQUIRED")
    if Condition.parse(submission.condition) is None:
        allowed = ", ".join(condition.value for condition in Condition)
        return _error("condition", f"Condition must be one of: {allowed}", "INVALID_CHOICE")
    return None


def _check_description(
    submission: ListingSubmission, final: bool, today: date
) -> dict[str, str] | None:
    text = (submission.description or "").strip()
    if len(text) < MIN_DESCRIPTION_LENGTH:
        return _error(
            "description",
            f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters",
            "TOO_SHORT",
        )
    return None


def _check_price(submission: ListingSubmission, final: bool, today: date) -> dict[str, str] | None:
    if _blank(submission.price):
        # Price may be filled in later (e.g. from a price suggestion).
        if final:
            return _error("price", "Price is required", "REQUIRED")
        return None
    price = _parse_decimal(submission.price)  # type: ignore[arg-type]
    if price is None:
        return _error("price", "Price must be a number", "INVALID_NUMBER")
    if price < 0:
        return _error("price", "Price cannot be negative", "INVALID_VALUE")
    if final and price == 0:
        return _error("price", "Price must be greater than 0", "INVALID_VALUE")
    if price > MAX_LISTING_PRICE:
        return _error("price", f"Price cannot exceed {MAX_LISTING_PRICE}", "INVALID_VALUE")
    return None


def _check_photo(submission: ListingSubmission, final: bool, today: date) -> dict[str, str] | None:
    photo = submission.photo
    if photo is None:
        return None
    if photo.content_type not in ALLOWED_PHOTO_CONTENT_TYPES:
        return _error("photo", "Only JPG, PNG, WEBP allowed", "INVALID_CONTENT_TYPE")
    if photo.size > MAX_PHOTO_BYTES:
        return _error("photo", "Each file must be 5MB or less", "FILE_TOO_LARGE")
    return None


FieldRule = Callable[[ListingSubmission, bool, date], dict[str, str] | None]

FIELD_RULES: dict[str, FieldRule] = {
    "make": _check_make,
    "model": _check_model,
    "year": _check_year,
    "mileage": _check_mileage,
    "condition": _check_condition,
    "description": _check_description,
    "price": _check_price,
    "photo": _check_photo,
}


def validate_fields(
    submission: ListingSubmission,
    fields: Iterable[str],
    *,
    final: bool = False,
    today: date | None = None,
) -> list[dict[str, str]]:
    """
    Run the rules for the named fields and collect every failure.

    With final=False (a single form step) price and mileage may still be
    empty; with final=True both are required and price must be above 0.
    """
    today = today or date.today()
    errors = []
    for name in fields:
        error = FIELD_RULES[name](submission, final, today)
        if error is not None:
            errors.append(error)
    return errors


def normalize_submission(
    submission: ListingSubmission, today: date | None = None
) -> NormalizedSubmission:
    """
    Validate the whole submission and convert it to typed values.

    Raises:
        ValidationError: With one entry per failing field
    """
    errors = validate_fields(submission, ALL_FIELDS, final=True, today=today)
    if errors:
        raise ValidationError(errors=errors)

    optional = {name: _optional_text(getattr(submission, name)) for name in OPTIONAL_TEXT_FIELDS}

    return NormalizedSubmission(
        make=submission.make.strip(),  # type: ignore[union-attr]
        model=submission.model.strip(),  # type: ignore[union-attr]
        year=int(submission.year.strip()),  # type: ignore[union-attr]
        price=Decimal(submission.price.strip()),  # type: ignore[union-attr]
        mileage=int(submission.mileage.strip()),  # type: ignore[union-attr]
        condition=Condition.parse(submission.condition),  # type: ignore[arg-type]
        description=submission.description.strip(),  # type: ignore[union-attr]
        featured=(submission.featured or "").strip().lower() == "true",
        **optional,
    )


def _optional_text(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None
