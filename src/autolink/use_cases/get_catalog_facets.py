from __future__ import annotations

from autolink.domain.filtering import CatalogFacets, build_facets
from autolink.ports.listing_repository import ListingRepository


class GetCatalogFacets:
    """Makes, models per make and years currently present in the store."""

    def __init__(self, listing_repository: ListingRepository) -> None:
        self._repository = listing_repository

    def execute(self) -> CatalogFacets:
        return build_facets(self._repository.list_all())
