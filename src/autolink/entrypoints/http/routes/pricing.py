from fastapi import APIRouter, Depends

from autolink.entrypoints.http.dependencies import get_suggest_price_use_case
from autolink.entrypoints.http.dtos.pricing import (
    PriceSuggestionRequestDTO,
    PriceSuggestionResponseDTO,
)
from autolink.entrypoints.http.error_responses import ErrorResponse
from autolink.entrypoints.http.mappers.pricing_mapper import PricingMapper
from autolink.use_cases.suggest_price import SuggestPrice


router = APIRouter(tags=["Pricing"])


@router.post(
    "/price-suggestions",
    response_model=PriceSuggestionResponseDTO,
    summary="Suggest a listing price",
    description="""
    Ask the AI appraiser for an advisory listing price.

    The condition may be free text; it is mapped onto one of the five
    supported conditions before the call. Nothing is stored: the client
    decides whether to copy the price into its submission.
    """,
    responses={
        422: {"model": ErrorResponse, "description": "Invalid vehicle description"},
        502: {"model": ErrorResponse, "description": "Suggestion service failed"},
        503: {"model": ErrorResponse, "description": "Suggestions not configured"},
    },
)
def suggest_price(
    payload: PriceSuggestionRequestDTO,
    use_case: SuggestPrice = Depends(get_suggest_price_use_case),
) -> PriceSuggestionResponseDTO:
    request = PricingMapper.to_domain_request(payload)

    result = use_case.execute(request)

    return PricingMapper.to_response(result)
