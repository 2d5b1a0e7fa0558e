from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from autolink.domain.errors import ValidationError
from autolink.domain.listing import Condition
from autolink.domain.submission import MIN_YEAR


@dataclass(frozen=True, slots=True)
class PriceSuggestionRequest:
    make: str
    model: str
    year: int
    mileage: int
    condition: Condition
    additional_details: str | None = None

    def validate(self, today: date | None = None) -> None:
        """
        Raises:
            ValidationError: With one entry per invalid field
        """
        today = today or date.today()
        errors = []
        if not self.make.strip():
            errors.append({"field": "make", "message": "Make is required", "code": "REQUIRED"})
        if not self.model.strip():
            errors.append({"field": "model", "message": "Model is required", "code": "REQUIRED"})
        if not MIN_YEAR <= self.year <= today.year + 1:
            errors.append(
                {
                    "field": "year",
                    "message": f"Year must be between {MIN_YEAR} and {today.year + 1}",
                    "code": "INVALID_YEAR",
                }
            )
        if self.mileage < 0:
            errors.append(
                {
                    "field": "mileage",
                    "message": "Mileage cannot be negative",
                    "code": "INVALID_VALUE",
                }
            )
        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class PriceSuggestion:
    """Advisory price in US dollars. Accepting it never submits a listing."""

    suggested_price: Decimal
    reasoning: str
