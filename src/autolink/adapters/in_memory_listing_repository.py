from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from autolink.domain.errors import ConflictError
from autolink.domain.listing import Listing
from autolink.ports.listing_repository import ListingRepository

logger = logging.getLogger(__name__)


class InMemoryListingRepository(ListingRepository):
    """
    Process-local listing store.

    - Keeps listings newest first (insert prepends)
    - Indexes listings by id for lookups and collision checks
    - A lock guards every read and write; sync routes run in a thread pool
    - Contents are lost on restart
    """

    def __init__(self, seed: Iterable[Listing] = ()) -> None:
        self._lock = threading.Lock()
        self._listings: list[Listing] = []
        self._by_id: dict[str, Listing] = {}
        self.initialize(seed)

    def initialize(self, seed: Iterable[Listing]) -> None:
        listings = list(seed)
        by_id: dict[str, Listing] = {}
        for listing in listings:
            if listing.id in by_id:
                raise ConflictError(
                    f"Duplicate listing id '{listing.id}' in seed data", identifier=listing.id
                )
            by_id[listing.id] = listing

        with self._lock:
            self._listings = listings
            self._by_id = by_id

        if listings:
            logger.info("Listing store initialized", extra={"listing_count": len(listings)})

    def list_all(self) -> list[Listing]:
        with self._lock:
            return list(self._listings)

    def get_by_id(self, listing_id: str) -> Listing | None:
        with self._lock:
            return self._by_id.get(listing_id)

    def insert(self, listing: Listing) -> None:
        with self._lock:
            if listing.id in self._by_id:
                raise ConflictError(
                    f"Listing with identifier '{listing.id}' already exists",
                    resource="Listing",
                    identifier=listing.id,
                )
            self._listings.insert(0, listing)
            self._by_id[listing.id] = listing
            total = len(self._listings)

        logger.info(
            "Listing inserted",
            extra={"listing_id": listing.id, "listing_count": total},
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._listings)
