"""
Test suite for ListingMapper.

The mapper only translates between REST DTOs and domain models:
- query params → ListingFilters (lenient bound parsing)
- Listing → response DTO (Decimal → str, photo fallback)
- multipart fields and file → ListingSubmission / PhotoUpload
"""

from __future__ import annotations

import io
from dataclasses import replace
from decimal import Decimal

from autolink.domain.filtering import CatalogFacets
from autolink.domain.listing import ListingFilters
from autolink.domain.submission import MAX_PHOTO_BYTES, PhotoUpload
from autolink.entrypoints.http.dtos.listings import ListingResponseDTO, ListingsSearchQueryDTO
from autolink.entrypoints.http.mappers.listing_mapper import ListingMapper
from autolink.infra.seed import SEED_LISTINGS
from autolink.use_cases.search_listings import SearchListingsRequest, SearchListingsResponse
from autolink.use_cases.submit_listing import SubmitListingResponse


# ==============================================================================
# to_domain_filters() - DTO → Domain Filters
# ==============================================================================


def test_to_domain_filters_with_all_fields() -> None:
    """Mapper converts all filter fields from DTO to domain."""
    dto = ListingsSearchQueryDTO(
        make="Toyota",
        model="Camry",
        year_min="2018",
        year_max="2023",
        price_min="20000.00",
        price_max="35000.50",
        featured=True,
    )

    result = ListingMapper.to_domain_filters(dto)

    assert result == ListingFilters(
        make="Toyota",
        model="Camry",
        year_min=2018,
        year_max=2023,
        price_min=Decimal("20000.00"),
        price_max=Decimal("35000.50"),
        featured=True,
    )


def test_to_domain_filters_empty_dto() -> None:
    result = ListingMapper.to_domain_filters(ListingsSearchQueryDTO())

    assert result.is_empty


def test_to_domain_filters_drops_malformed_bounds() -> None:
    dto = ListingsSearchQueryDTO(year_min="soon", price_max="", make="")

    assert ListingMapper.to_domain_filters(dto).is_empty


def test_to_search_request_wraps_filters() -> None:
    request = ListingMapper.to_search_request(ListingsSearchQueryDTO(make="BMW"))

    assert isinstance(request, SearchListingsRequest)
    assert request.filters.make == "BMW"


# ==============================================================================
# to_listing_response() - Domain → DTO
# ==============================================================================


def test_to_listing_response_converts_all_fields() -> None:
    listing = SEED_LISTINGS[1]

    dto = ListingMapper.to_listing_response(listing)

    assert isinstance(dto, ListingResponseDTO)
    assert dto.id == "2"
    assert dto.price == "32000"
    assert dto.condition == "used - good"
    assert dto.photos == ["/images/cars/honda-crv-detail1.png"]
    assert dto.featured is True
    assert dto.engine == "1.5L Turbo I4"
    assert dto.vin is None


def test_to_listing_response_keeps_decimal_precision() -> None:
    listing = replace(SEED_LISTINGS[0], price=Decimal("27999.99"))

    assert ListingMapper.to_listing_response(listing).price == "27999.99"


def test_to_listing_response_unpriced() -> None:
    listing = replace(SEED_LISTINGS[0], price=None)

    assert ListingMapper.to_listing_response(listing).price is None


def test_to_listing_response_photo_fallback() -> None:
    dto = ListingMapper.to_listing_response(SEED_LISTINGS[2])

    assert dto.photos == [SEED_LISTINGS[2].image_url]


def test_to_search_response_preserves_order() -> None:
    result = SearchListingsResponse(listings=list(SEED_LISTINGS[3:]))

    dtos = ListingMapper.to_search_response(result)

    assert [dto.id for dto in dtos] == ["4", "5", "6"]


# ==============================================================================
# Submission mapping
# ==============================================================================


def test_to_photo_upload_reads_stream() -> None:
    upload = ListingMapper.to_photo_upload("car.PNG", "IMAGE/PNG", io.BytesIO(b"data"))

    assert upload == PhotoUpload(filename="car.PNG", content_type="image/png", content=b"data")


def test_to_photo_upload_stops_reading_past_size_limit() -> None:
    stream = io.BytesIO(b"x" * (MAX_PHOTO_BYTES + 100))

    upload = ListingMapper.to_photo_upload("big.png", "image/png", stream)

    assert upload is not None
    assert upload.size == MAX_PHOTO_BYTES + 1
    assert stream.tell() == MAX_PHOTO_BYTES + 1


def test_to_photo_upload_empty_part_is_no_photo() -> None:
    assert ListingMapper.to_photo_upload("", None, io.BytesIO(b"")) is None


def test_to_photo_upload_missing_content_type() -> None:
    upload = ListingMapper.to_photo_upload("car.png", None, io.BytesIO(b"data"))

    assert upload is not None
    assert upload.content_type == ""


def test_to_submit_request_builds_submission() -> None:
    photo = PhotoUpload("a.png", "image/png", b"x")

    request = ListingMapper.to_submit_request({"make": "Kia", "year": "2019"}, photo)

    assert request.submission.make == "Kia"
    assert request.submission.year == "2019"
    assert request.submission.model is None
    assert request.submission.photo == photo


def test_to_created_response() -> None:
    result = SubmitListingResponse(listing=SEED_LISTINGS[0], photo_stored=False)

    dto = ListingMapper.to_created_response(result)

    assert dto.message == "Car listed successfully"
    assert dto.car.id == "1"


def test_to_facets_response() -> None:
    facets = CatalogFacets(makes=["Kia"], models_by_make={"Kia": ["Rio"]}, years=[2019])

    dto = ListingMapper.to_facets_response(facets)

    assert dto.model_dump() == {
        "makes": ["Kia"],
        "models_by_make": {"Kia": ["Rio"]},
        "years": [2019],
    }
