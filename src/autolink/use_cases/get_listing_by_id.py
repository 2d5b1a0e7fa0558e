"""Get listing by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from autolink.domain.errors import NotFoundError, ValidationError
from autolink.domain.listing import Listing
from autolink.ports.listing_repository import ListingRepository


@dataclass(frozen=True, slots=True)
class GetListingByIdRequest:
    """Request to get a listing by ID."""

    listing_id: str


@dataclass(frozen=True, slots=True)
class GetListingByIdResponse:
    """Response containing the requested listing."""

    listing: Listing


class GetListingById:
    """
    Use case for retrieving a single listing by ID.

    Responsibilities:
    - Reject blank identifiers
    - Delegate to the store for the lookup
    - Turn an absent listing into NotFoundError
    """

    def __init__(self, listing_repository: ListingRepository) -> None:
        self._repository = listing_repository

    def execute(self, request: GetListingByIdRequest) -> GetListingByIdResponse:
        """
        Execute the get listing by ID use case.

        Raises:
            ValidationError: If listing_id is blank
            NotFoundError: If no listing has the given ID
        """
        if not request.listing_id.strip():
            raise ValidationError(
                errors=[
                    {
                        "field": "listing_id",
                        "message": "Listing id is required",
                        "code": "REQUIRED",
                    }
                ]
            )

        listing = self._repository.get_by_id(request.listing_id)

        if listing is None:
            raise NotFoundError(resource="Listing", identifier=request.listing_id)

        return GetListingByIdResponse(listing=listing)
