from __future__ import annotations

import logging
from dataclasses import dataclass

from autolink.domain.listing import Condition
from autolink.domain.pricing import PriceSuggestion, PriceSuggestionRequest
from autolink.ports.price_suggester import PriceSuggester

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SuggestPriceRequest:
    make: str
    model: str
    year: int
    mileage: int
    condition: str  # free text; normalised before the call
    additional_details: str | None = None


@dataclass(frozen=True, slots=True)
class SuggestPriceResponse:
    suggestion: PriceSuggestion
    condition: Condition


class SuggestPrice:
    """
    Ask the price suggester for an advisory listing price.

    The free-text condition is mapped onto one of the five supported values
    before the suggester sees it. The result is advisory: nothing is stored.
    """

    def __init__(self, price_suggester: PriceSuggester) -> None:
        self._price_suggester = price_suggester

    def execute(self, request: SuggestPriceRequest) -> SuggestPriceResponse:
        """
        Raises:
            ValidationError: If make/model are blank, year or mileage out of range
            ExternalServiceError: If the suggester call fails
        """
        condition = Condition.from_text(request.condition)
        suggestion_request = PriceSuggestionRequest(
            make=request.make.strip(),
            model=request.model.strip(),
            year=request.year,
            mileage=request.mileage,
            condition=condition,
            additional_details=(request.additional_details or "").strip() or None,
        )
        suggestion_request.validate()

        suggestion = self._price_suggester.suggest(suggestion_request)

        logger.info(
            "Price suggested",
            extra={
                "make": suggestion_request.make,
                "model": suggestion_request.model,
                "year": suggestion_request.year,
                "suggested_price": str(suggestion.suggested_price),
            },
        )
        return SuggestPriceResponse(suggestion=suggestion, condition=condition)
