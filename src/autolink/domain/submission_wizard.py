from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal
from enum import Enum
from typing import Any

from autolink.domain.errors import ConflictError, DomainError, ValidationError
from autolink.domain.listing import Listing
from autolink.domain.submission import (
    ALL_FIELDS,
    DETAIL_FIELDS,
    PHOTO_FIELDS,
    ListingSubmission,
    validate_fields,
)

logger = logging.getLogger(__name__)


class WizardStep(Enum):
    DETAILS = 1
    PHOTO = 2
    REVIEW = 3
    SUBMITTED = 4


# Fields checked before leaving each step
STEP_FIELDS: dict[WizardStep, frozenset[str]] = {
    WizardStep.DETAILS: frozenset(DETAIL_FIELDS),
    WizardStep.PHOTO: frozenset(PHOTO_FIELDS),
    WizardStep.REVIEW: frozenset(ALL_FIELDS),
}

_NEXT_STEP = {
    WizardStep.DETAILS: WizardStep.PHOTO,
    WizardStep.PHOTO: WizardStep.REVIEW,
}

_PREVIOUS_STEP = {
    WizardStep.PHOTO: WizardStep.DETAILS,
    WizardStep.REVIEW: WizardStep.PHOTO,
}

PHOTO_REQUIRED_ERROR = {
    "field": "photo",
    "message": "At least one photo is required",
    "code": "REQUIRED",
}


class SubmissionWizard:
    """
    Client-side state of the multi-step sell form.

    DETAILS -> PHOTO -> REVIEW -> SUBMITTED

    - advance() validates only the current step's fields; the form needs a
      photo before review even though the API accepts a listing without one
    - back() never validates
    - submit() validates the whole record, then runs the commit callable;
      a failed commit leaves the wizard at REVIEW
    - SUBMITTED is terminal; start a new wizard for the next listing
    """

    def __init__(self, draft: ListingSubmission | None = None) -> None:
        self.step = WizardStep.DETAILS
        self.draft = draft or ListingSubmission()
        self.errors: list[dict[str, str]] = []
        self.submit_error: str | None = None
        self.listing: Listing | None = None

    @property
    def is_submitted(self) -> bool:
        return self.step is WizardStep.SUBMITTED

    def update(self, **fields: Any) -> None:
        self._ensure_open()
        self.draft = self.draft.with_changes(**fields)

    def accept_price_suggestion(self, price: Decimal) -> None:
        """Copy a suggested price into the draft. Never submits."""
        self.update(price=str(price))

    def advance(self) -> bool:
        if self.step not in _NEXT_STEP:
            raise ConflictError(
                f"Cannot advance from step {self.step.name}", step=self.step.name
            )

        self.errors = self._step_errors(self.step)
        if self.errors:
            return False

        self.step = _NEXT_STEP[self.step]
        return True

    def back(self) -> None:
        self._ensure_open()
        if self.step in _PREVIOUS_STEP:
            self.step = _PREVIOUS_STEP[self.step]
            self.errors = []

    def submit(self, commit: Callable[[ListingSubmission], Listing]) -> bool:
        if self.step is not WizardStep.REVIEW:
            raise ConflictError(
                f"Cannot submit from step {self.step.name}", step=self.step.name
            )

        self.submit_error = None
        self.errors = self._step_errors(WizardStep.REVIEW, final=True)
        if self.errors:
            return False

        try:
            self.listing = commit(self.draft)
        except ValidationError as exc:
            self.errors = exc.errors or []
            self.submit_error = exc.message
            return False
        except DomainError as exc:
            self.submit_error = exc.message
            return False
        except OSError as exc:
            logger.warning("Listing commit failed", extra={"error": str(exc)})
            self.submit_error = "Your listing could not be saved. Please try again."
            return False

        self.step = WizardStep.SUBMITTED
        return True

    def _step_errors(self, step: WizardStep, final: bool = False) -> list[dict[str, str]]:
        fields = STEP_FIELDS[step]
        errors = validate_fields(self.draft, sorted(fields), final=final)
        if "photo" in fields and self.draft.photo is None:
            errors.append(dict(PHOTO_REQUIRED_ERROR))
        return errors

    def _ensure_open(self) -> None:
        if self.is_submitted:
            raise ConflictError("Submission already completed", step=self.step.name)
