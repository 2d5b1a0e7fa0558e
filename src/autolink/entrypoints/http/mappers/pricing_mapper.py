from __future__ import annotations

from autolink.entrypoints.http.dtos.pricing import (
    PriceSuggestionRequestDTO,
    PriceSuggestionResponseDTO,
)
from autolink.use_cases.suggest_price import SuggestPriceRequest, SuggestPriceResponse


class PricingMapper:
    """Maps between REST DTOs and domain models for price suggestions."""

    @staticmethod
    def to_domain_request(dto: PriceSuggestionRequestDTO) -> SuggestPriceRequest:
        return SuggestPriceRequest(
            make=dto.make,
            model=dto.model,
            year=dto.year,
            mileage=dto.mileage,
            condition=dto.condition,
            additional_details=dto.additional_details,
        )

    @staticmethod
    def to_response(result: SuggestPriceResponse) -> PriceSuggestionResponseDTO:
        """Decimal → string at the boundary."""
        return PriceSuggestionResponseDTO(
            suggested_price=str(result.suggestion.suggested_price),
            reasoning=result.suggestion.reasoning,
            condition=result.condition.value,
        )
