"""Tests for listing submission rules and normalisation."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from autolink.domain.errors import ValidationError
from autolink.domain.listing import Condition
from autolink.domain.submission import (
    ALL_FIELDS,
    DETAIL_FIELDS,
    MAX_PHOTO_BYTES,
    ListingSubmission,
    PhotoUpload,
    normalize_submission,
    validate_fields,
)

TODAY = date(2025, 6, 1)


@pytest.fixture()
def valid_submission() -> ListingSubmission:
    return ListingSubmission(
        make="Mazda",
        model="CX-5",
        year="2020",
        price="21500",
        mileage="41000",
        condition="used - good",
        description="Well kept compact SUV with new tires.",
    )


def codes_by_field(errors: list[dict[str, str]]) -> dict[str, str]:
    return {error["field"]: error["code"] for error in errors}


# ==============================================================================
# validate_fields
# ==============================================================================


def test_valid_submission_has_no_errors(valid_submission: ListingSubmission) -> None:
    assert validate_fields(valid_submission, ALL_FIELDS, final=True, today=TODAY) == []


def test_empty_submission_reports_required_fields() -> None:
    errors = validate_fields(ListingSubmission(), DETAIL_FIELDS, today=TODAY)

    assert codes_by_field(errors) == {
        "make": "REQUIRED",
        "model": "REQUIRED",
        "year": "REQUIRED",
        "condition": "REQUIRED",
        "description": "TOO_SHORT",
    }


def test_only_named_fields_are_checked() -> None:
    errors = validate_fields(ListingSubmission(), ["make"], today=TODAY)

    assert codes_by_field(errors) == {"make": "REQUIRED"}


def test_whitespace_make_is_blank(valid_submission: ListingSubmission) -> None:
    submission = valid_submission.with_changes(make="   ")

    assert codes_by_field(validate_fields(submission, ["make"], today=TODAY)) == {
        "make": "REQUIRED"
    }


@pytest.mark.parametrize("year", ["1899", "2027", "abc", "20.5"])
def test_year_out_of_range(valid_submission: ListingSubmission, year: str) -> None:
    errors = validate_fields(valid_submission.with_changes(year=year), ["year"], today=TODAY)

    assert errors == [
        {"field": "year", "message": "Year must be between 1900 and 2026", "code": "INVALID_YEAR"}
    ]


@pytest.mark.parametrize("year", ["1900", "2026"])
def test_year_bounds_are_inclusive(valid_submission: ListingSubmission, year: str) -> None:
    assert validate_fields(valid_submission.with_changes(year=year), ["year"], today=TODAY) == []


def test_negative_mileage(valid_submission: ListingSubmission) -> None:
    errors = validate_fields(valid_submission.with_changes(mileage="-1"), ["mileage"], today=TODAY)

    assert errors[0]["message"] == "Mileage cannot be negative"
    assert errors[0]["code"] == "INVALID_VALUE"


def test_non_numeric_mileage(valid_submission: ListingSubmission) -> None:
    errors = validate_fields(
        valid_submission.with_changes(mileage="lots"), ["mileage"], today=TODAY
    )

    assert codes_by_field(errors) == {"mileage": "INVALID_NUMBER"}


def test_price_and_mileage_may_be_blank_before_final(valid_submission: ListingSubmission) -> None:
    submission = valid_submission.with_changes(price="", mileage=None)

    assert validate_fields(submission, ["price", "mileage"], today=TODAY) == []


def test_price_and_mileage_required_at_final(valid_submission: ListingSubmission) -> None:
    submission = valid_submission.with_changes(price="", mileage=None)

    errors = validate_fields(submission, ["price", "mileage"], final=True, today=TODAY)

    assert codes_by_field(errors) == {"price": "REQUIRED", "mileage": "REQUIRED"}


def test_negative_price(valid_submission: ListingSubmission) -> None:
    errors = validate_fields(valid_submission.with_changes(price="-5"), ["price"], today=TODAY)

    assert errors[0]["message"] == "Price cannot be negative"


def test_zero_price_allowed_on_step_but_not_final(valid_submission: ListingSubmission) -> None:
    submission = valid_submission.with_changes(price="0")

    assert validate_fields(submission, ["price"], today=TODAY) == []
    errors = validate_fields(submission, ["price"], final=True, today=TODAY)
    assert errors[0]["message"] == "Price must be greater than 0"


def test_price_above_provider_limit(valid_submission: ListingSubmission) -> None:
    submission = valid_submission.with_changes(price="1e30")

    errors = validate_fields(submission, ["price"], final=True, today=TODAY)

    assert errors == [
        {
            "field": "price",
            "message": "Price cannot exceed 99999999.99",
            "code": "INVALID_VALUE",
        }
    ]
    assert validate_fields(
        valid_submission.with_changes(price="99999999.99"), ["price"], final=True, today=TODAY
    ) == []


@pytest.mark.parametrize("price", ["cheap", "NaN", "Infinity"])
def test_non_numeric_price(valid_submission: ListingSubmission, price: str) -> None:
    errors = validate_fields(valid_submission.with_changes(price=price), ["price"], today=TODAY)

    assert codes_by_field(errors) == {"price": "INVALID_NUMBER"}


def test_unknown_condition(valid_submission: ListingSubmission) -> None:
    errors = validate_fields(
        valid_submission.with_changes(condition="excellent"), ["condition"], today=TODAY
    )

    assert codes_by_field(errors) == {"condition": "INVALID_CHOICE"}


def test_short_description(valid_submission: ListingSubmission) -> None:
    errors = validate_fields(
        valid_submission.with_changes(description="  too short  "), ["description"], today=TODAY
    )

    assert codes_by_field(errors) == {"description": "TOO_SHORT"}


# ==============================================================================
# Photo rules
# ==============================================================================


def test_photo_is_optional(valid_submission: ListingSubmission) -> None:
    assert validate_fields(valid_submission, ["photo"], final=True, today=TODAY) == []


def test_photo_rejects_other_content_types(valid_submission: ListingSubmission) -> None:
    photo = PhotoUpload(filename="car.gif", content_type="image/gif", content=b"GIF89a")

    errors = validate_fields(valid_submission.with_changes(photo=photo), ["photo"], today=TODAY)

    assert errors == [
        {"field": "photo", "message": "Only JPG, PNG, WEBP allowed", "code": "INVALID_CONTENT_TYPE"}
    ]


def test_photo_size_limit(valid_submission: ListingSubmission) -> None:
    at_limit = PhotoUpload("a.png", "image/png", b"x" * MAX_PHOTO_BYTES)
    over_limit = PhotoUpload("b.png", "image/png", b"x" * (MAX_PHOTO_BYTES + 1))

    assert validate_fields(valid_submission.with_changes(photo=at_limit), ["photo"]) == []
    errors = validate_fields(valid_submission.with_changes(photo=over_limit), ["photo"])
    assert errors[0]["message"] == "Each file must be 5MB or less"
    assert errors[0]["code"] == "FILE_TOO_LARGE"


# ==============================================================================
# normalize_submission
# ==============================================================================


def test_normalize_converts_types(valid_submission: ListingSubmission) -> None:
    submission = valid_submission.with_changes(
        make="  Mazda ", condition="Used - Good", featured="TRUE", vin="  ", engine=" 2.5L I4 "
    )

    normalized = normalize_submission(submission, today=TODAY)

    assert normalized.make == "Mazda"
    assert normalized.year == 2020
    assert normalized.price == Decimal("21500")
    assert normalized.mileage == 41000
    assert normalized.condition is Condition.USED_GOOD
    assert normalized.featured is True
    assert normalized.vin is None
    assert normalized.engine == "2.5L I4"


def test_normalize_featured_defaults_false(valid_submission: ListingSubmission) -> None:
    assert normalize_submission(valid_submission, today=TODAY).featured is False


def test_normalize_raises_with_all_field_errors() -> None:
    with pytest.raises(ValidationError) as exc_info:
        normalize_submission(ListingSubmission(make="Kia"), today=TODAY)

    fields = {error["field"] for error in exc_info.value.errors or []}
    assert fields == {"model", "year", "mileage", "condition", "description", "price"}


def test_to_listing_uses_image_as_single_photo(valid_submission: ListingSubmission) -> None:
    listing = normalize_submission(valid_submission, today=TODAY).to_listing(
        "abc", "/images/uploads/car.png"
    )

    assert listing.id == "abc"
    assert listing.image_url == "/images/uploads/car.png"
    assert listing.photos == ("/images/uploads/car.png",)
