from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from autolink.domain.listing import DEFAULT_LISTING_IMAGE, Listing, generate_listing_id
from autolink.domain.submission import ListingSubmission, PhotoUpload, normalize_submission
from autolink.ports.listing_repository import ListingRepository
from autolink.ports.photo_storage import PhotoStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SubmitListingRequest:
    submission: ListingSubmission


@dataclass(frozen=True, slots=True)
class SubmitListingResponse:
    listing: Listing
    photo_stored: bool


class SubmitListing:
    """
    Turn a raw submission (plus at most one photo) into a stored listing.

    Order of work:
    1. Validate and normalise every field, photo type and size included
    2. Generate the identifier
    3. Write the photo; a write failure falls back to the placeholder image
    4. Prepend the listing to the store; if that fails the photo written in
       step 3 is removed again
    """

    def __init__(
        self,
        listing_repository: ListingRepository,
        photo_storage: PhotoStorage,
        id_generator: Callable[[], str] = generate_listing_id,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._repository = listing_repository
        self._photo_storage = photo_storage
        self._id_generator = id_generator
        self._today = today

    def execute(self, request: SubmitListingRequest) -> SubmitListingResponse:
        """
        Raises:
            ValidationError: With one entry per failing field
            ConflictError: If the generated identifier is already taken
        """
        fields = normalize_submission(request.submission, today=self._today())
        listing_id = self._id_generator()

        stored_path = self._store_photo(request.submission.photo)
        listing = fields.to_listing(listing_id, stored_path or DEFAULT_LISTING_IMAGE)

        try:
            self._repository.insert(listing)
        except Exception:
            if stored_path is not None:
                self._photo_storage.delete(stored_path)
            raise

        logger.info(
            "Listing submitted",
            extra={
                "listing_id": listing.id,
                "make": listing.make,
                "model": listing.model,
                "image_url": listing.image_url,
            },
        )
        return SubmitListingResponse(listing=listing, photo_stored=stored_path is not None)

    def _store_photo(self, photo: PhotoUpload | None) -> str | None:
        if photo is None:
            return None
        try:
            return self._photo_storage.save(photo)
        except OSError as exc:
            logger.error(
                "Photo upload failed, using placeholder image",
                exc_info=exc,
                extra={"photo_filename": photo.filename},
            )
            return None
