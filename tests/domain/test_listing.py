"""Tests for the Listing entity, Condition values and ListingFilters parsing."""

from __future__ import annotations

import re
from decimal import Decimal

import pytest

from autolink.domain.listing import (
    DEFAULT_LISTING_IMAGE,
    Condition,
    FilterValidationError,
    Listing,
    ListingFilters,
    generate_listing_id,
)


def make_listing(**overrides) -> Listing:
    fields = dict(
        id="1",
        make="Toyota",
        model="Camry",
        year=2022,
        price=Decimal("28000"),
        mileage=15000,
        condition=Condition.USED_LIKE_NEW,
        description="A reliable sedan.",
        image_url="/images/cars/toyota-camry-main.png",
    )
    fields.update(overrides)
    return Listing(**fields)


# ==============================================================================
# Condition
# ==============================================================================


class TestConditionParse:
    @pytest.mark.parametrize("raw", ["new", "NEW", "  used - good  ", "Used - Like New"])
    def test_accepts_wire_values_case_insensitively(self, raw: str) -> None:
        assert Condition.parse(raw) is not None

    def test_returns_member(self) -> None:
        assert Condition.parse("used - fair") is Condition.USED_FAIR

    @pytest.mark.parametrize("raw", [None, "", "excellent", "used-good"])
    def test_rejects_unknown_values(self, raw: str | None) -> None:
        assert Condition.parse(raw) is None


class TestConditionFromText:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Used - Like New", Condition.USED_LIKE_NEW),
            ("like new, barely driven", Condition.USED_LIKE_NEW),
            ("good", Condition.USED_GOOD),
            ("Fair", Condition.USED_FAIR),
            ("poor shape", Condition.USED_POOR),
            ("Brand new", Condition.NEW),
        ],
    )
    def test_maps_keywords(self, text: str, expected: Condition) -> None:
        assert Condition.from_text(text) is expected

    @pytest.mark.parametrize("text", [None, "", "excellent"])
    def test_defaults_to_used_good(self, text: str | None) -> None:
        assert Condition.from_text(text) is Condition.USED_GOOD

    def test_like_new_wins_over_new(self) -> None:
        """'like new' is checked before the bare 'new' keyword."""
        assert Condition.from_text("like new") is Condition.USED_LIKE_NEW


# ==============================================================================
# Listing
# ==============================================================================


class TestListing:
    def test_display_photos_uses_gallery_when_present(self) -> None:
        listing = make_listing(photos=("/a.png", "/b.png"))

        assert listing.display_photos == ("/a.png", "/b.png")

    def test_display_photos_falls_back_to_primary_image(self) -> None:
        listing = make_listing(photos=())

        assert listing.display_photos == ("/images/cars/toyota-camry-main.png",)

    def test_is_immutable(self) -> None:
        listing = make_listing()

        with pytest.raises(AttributeError):
            listing.price = Decimal("1")  # type: ignore[misc]

    @pytest.mark.parametrize(
        "price,expected",
        [
            (Decimal("28000"), True),
            (Decimal("0.01"), True),
            (Decimal("99999999.99"), True),
            (Decimal("0"), False),
            (Decimal("100000000"), False),
            (Decimal("1e30"), False),
            (None, False),
        ],
    )
    def test_checkout_eligibility(self, price: Decimal | None, expected: bool) -> None:
        assert make_listing(price=price).is_checkout_eligible is expected

    def test_default_image_path(self) -> None:
        assert DEFAULT_LISTING_IMAGE == "/images/cars/default-new-listing.png"


def test_generate_listing_id_format() -> None:
    listing_id = generate_listing_id()

    assert re.fullmatch(r"\d+-[0-9a-z]{7}", listing_id)


def test_generate_listing_id_varies() -> None:
    ids = {generate_listing_id() for _ in range(50)}

    assert len(ids) > 1


# ==============================================================================
# ListingFilters
# ==============================================================================


class TestListingFiltersFromRaw:
    def test_empty_strings_become_none(self) -> None:
        filters = ListingFilters.from_raw(
            make="", model="  ", year_min="", year_max="", price_min="", price_max=""
        )

        assert filters == ListingFilters()
        assert filters.is_empty

    def test_parses_numeric_text(self) -> None:
        filters = ListingFilters.from_raw(
            make=" Honda ",
            year_min="2021",
            year_max="2022",
            price_min="20000",
            price_max="30000.50",
        )

        assert filters.make == "Honda"
        assert filters.year_min == 2021
        assert filters.year_max == 2022
        assert filters.price_min == Decimal("20000")
        assert filters.price_max == Decimal("30000.50")

    def test_price_bounds_keep_fraction(self) -> None:
        filters = ListingFilters.from_raw(price_max="27999.99")

        assert filters.price_max == Decimal("27999.99")

    @pytest.mark.parametrize("raw", ["abc", "20k", "NaN", "Infinity"])
    def test_malformed_price_bound_is_dropped(self, raw: str) -> None:
        assert ListingFilters.from_raw(price_min=raw).price_min is None

    @pytest.mark.parametrize("raw", ["abc", "2021.5", "twenty"])
    def test_malformed_year_bound_is_dropped(self, raw: str) -> None:
        assert ListingFilters.from_raw(year_min=raw).year_min is None

    def test_typed_values_pass_through(self) -> None:
        filters = ListingFilters.from_raw(year_min=2020, price_min=Decimal("100"))

        assert filters.year_min == 2020
        assert filters.price_min == Decimal("100")

    def test_featured_false_is_a_constraint(self) -> None:
        filters = ListingFilters.from_raw(featured=False)

        assert filters.featured is False
        assert not filters.is_empty


class TestListingFiltersValidate:
    def test_accepts_decimal_bounds(self) -> None:
        ListingFilters(price_min=Decimal("1"), price_max=Decimal("2")).validate()

    def test_rejects_float_price_min(self) -> None:
        with pytest.raises(FilterValidationError, match="price_min must be Decimal"):
            ListingFilters(price_min=1.5).validate()  # type: ignore[arg-type]

    def test_rejects_float_price_max(self) -> None:
        with pytest.raises(FilterValidationError, match="price_max must be Decimal"):
            ListingFilters(price_max=1.5).validate()  # type: ignore[arg-type]
