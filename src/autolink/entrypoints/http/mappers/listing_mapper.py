from __future__ import annotations

from typing import BinaryIO

from autolink.domain.filtering import CatalogFacets
from autolink.domain.listing import Listing, ListingFilters
from autolink.domain.submission import MAX_PHOTO_BYTES, ListingSubmission, PhotoUpload
from autolink.entrypoints.http.dtos.listings import (
    CatalogFacetsResponseDTO,
    ListingCreatedResponseDTO,
    ListingResponseDTO,
    ListingsSearchQueryDTO,
)
from autolink.use_cases.search_listings import SearchListingsRequest, SearchListingsResponse
from autolink.use_cases.submit_listing import SubmitListingRequest, SubmitListingResponse


class ListingMapper:
    """Maps between REST DTOs and domain models for listings."""

    @staticmethod
    def to_domain_filters(dto: ListingsSearchQueryDTO) -> ListingFilters:
        """
        Converts query params to domain filters.

        Empty values mean "no constraint"; unparsable bounds are dropped.
        """
        return ListingFilters.from_raw(
            make=dto.make,
            model=dto.model,
            year_min=dto.year_min,
            year_max=dto.year_max,
            price_min=dto.price_min,
            price_max=dto.price_max,
            featured=dto.featured,
        )

    @staticmethod
    def to_search_request(dto: ListingsSearchQueryDTO) -> SearchListingsRequest:
        return SearchListingsRequest(filters=ListingMapper.to_domain_filters(dto))

    @staticmethod
    def to_listing_response(listing: Listing) -> ListingResponseDTO:
        """
        Converts a domain Listing to the REST response DTO.

        Handles Decimal → str at the boundary and the photo fallback.
        """
        return ListingResponseDTO(
            id=listing.id,
            make=listing.make,
            model=listing.model,
            year=listing.year,
            price=str(listing.price) if listing.price is not None else None,
            mileage=listing.mileage,
            condition=listing.condition.value,
            description=listing.description,
            additional_details=listing.additional_details,
            image_url=listing.image_url,
            photos=list(listing.display_photos),
            featured=listing.featured,
            engine=listing.engine,
            transmission=listing.transmission,
            fuel_type=listing.fuel_type,
            exterior_color=listing.exterior_color,
            interior_color=listing.interior_color,
            vin=listing.vin,
        )

    @staticmethod
    def to_search_response(result: SearchListingsResponse) -> list[ListingResponseDTO]:
        return [ListingMapper.to_listing_response(listing) for listing in result.listings]

    @staticmethod
    def to_photo_upload(
        filename: str | None, content_type: str | None, stream: BinaryIO
    ) -> PhotoUpload | None:
        """
        Reads an uploaded file into a PhotoUpload.

        A file part without a name and without content counts as no photo.
        At most one byte past the size limit is read; the size rule rejects it.
        """
        content = stream.read(MAX_PHOTO_BYTES + 1)
        if not filename and not content:
            return None
        return PhotoUpload(
            filename=filename or "",
            content_type=(content_type or "").lower(),
            content=content,
        )

    @staticmethod
    def to_submit_request(
        fields: dict[str, str | None], photo: PhotoUpload | None
    ) -> SubmitListingRequest:
        return SubmitListingRequest(submission=ListingSubmission(**fields, photo=photo))

    @staticmethod
    def to_created_response(result: SubmitListingResponse) -> ListingCreatedResponseDTO:
        return ListingCreatedResponseDTO(
            message="Car listed successfully",
            car=ListingMapper.to_listing_response(result.listing),
        )

    @staticmethod
    def to_facets_response(facets: CatalogFacets) -> CatalogFacetsResponseDTO:
        return CatalogFacetsResponseDTO(
            makes=facets.makes,
            models_by_make=facets.models_by_make,
            years=facets.years,
        )
