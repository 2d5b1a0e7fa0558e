from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from autolink.domain.listing import Listing


class ListingRepository(ABC):
    """
    Port for the authoritative sequence of listings.

    Contract:
        - list_all() returns listings newest first
        - insert() places the new listing at the front
        - get_by_id() returns None when the listing does not exist
        - identifiers are unique; inserting a duplicate raises ConflictError
        - listings are never updated or deleted
    """

    @abstractmethod
    def initialize(self, seed: Iterable[Listing]) -> None:
        """Populate the store once at process start."""
        ...

    @abstractmethod
    def list_all(self) -> list[Listing]:
        """Return every listing, newest first. No filtering, no paging."""
        ...

    @abstractmethod
    def get_by_id(self, listing_id: str) -> Listing | None: ...

    @abstractmethod
    def insert(self, listing: Listing) -> None:
        """
        Prepend a listing.

        Raises:
            ConflictError: If a listing with the same id already exists
        """
        ...
