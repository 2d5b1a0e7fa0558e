from __future__ import annotations

import logging
from dataclasses import dataclass

from autolink.domain.filtering import filter_listings
from autolink.domain.listing import Listing, ListingFilters
from autolink.ports.listing_repository import ListingRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchListingsRequest:
    filters: ListingFilters


@dataclass(frozen=True, slots=True)
class SearchListingsResponse:
    listings: list[Listing]

    @property
    def is_empty(self) -> bool:
        return not self.listings


class SearchListings:
    """
    Listing search with sparse filters.

    Reads the full newest-first sequence from the store and narrows it with
    the filter engine. No paging: the whole match set is returned.
    """

    def __init__(self, listing_repository: ListingRepository) -> None:
        self._repository = listing_repository

    def execute(self, request: SearchListingsRequest) -> SearchListingsResponse:
        """
        Execute listing search.

        Args:
            request: Filter criteria (absent fields place no constraint)

        Returns:
            Response with the matching listings in store order

        Raises:
            FilterValidationError: If a price bound is not a Decimal
        """
        request.filters.validate()

        listings = filter_listings(self._repository.list_all(), request.filters)

        logger.debug(
            "Listing search",
            extra={"filters": request.filters, "results_count": len(listings)},
        )
        return SearchListingsResponse(listings=listings)
