from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from autolink.domain.checkout import CheckoutFailure, CheckoutItem
from autolink.domain.errors import NotFoundError, ValidationError
from autolink.entrypoints.http.dependencies import (
    get_create_checkout_session_use_case,
    get_get_listing_by_id_use_case,
)
from autolink.entrypoints.http.dtos.payments import (
    CheckoutSessionResponseDTO,
    PaymentCancelResponseDTO,
    PaymentSuccessResponseDTO,
)
from autolink.entrypoints.http.error_responses import CheckoutErrorResponse, ErrorResponse
from autolink.use_cases.create_checkout_session import (
    CreateCheckoutSession,
    CreateCheckoutSessionRequest,
)
from autolink.use_cases.get_listing_by_id import GetListingById, GetListingByIdRequest


router = APIRouter(tags=["Payments"])

FAILURE_STATUS = {
    CheckoutFailure.CONFIGURATION: status.HTTP_503_SERVICE_UNAVAILABLE,
    CheckoutFailure.INVALID_INPUT: 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    CheckoutFailure.PROVIDER: status.HTTP_502_BAD_GATEWAY,
}


@router.post(
    "/cars/{listing_id}/checkout",
    response_model=CheckoutSessionResponseDTO,
    summary="Create a hosted checkout session for a listing",
    description="""
    Returns the payment provider's session id; the client then redirects
    the buyer to the provider's hosted checkout page.

    Every failure (payments not configured, missing app URL, unknown car,
    invalid price, provider error) is reported as `{"error": "..."}`.
    """,
    responses={
        422: {"model": CheckoutErrorResponse, "description": "Unknown listing or invalid price"},
        502: {"model": CheckoutErrorResponse, "description": "Provider call failed"},
        503: {"model": CheckoutErrorResponse, "description": "Payments not configured"},
    },
)
def create_checkout_session(
    listing_id: str,
    get_listing: GetListingById = Depends(get_get_listing_by_id_use_case),
    use_case: CreateCheckoutSession = Depends(get_create_checkout_session_use_case),
) -> CheckoutSessionResponseDTO | JSONResponse:
    item: CheckoutItem | None
    try:
        listing = get_listing.execute(GetListingByIdRequest(listing_id=listing_id)).listing
    except NotFoundError:
        item = None
    else:
        item = CheckoutItem.from_listing(listing)

    result = use_case.execute(CreateCheckoutSessionRequest(item=item))

    if not result.ok:
        return JSONResponse(
            status_code=FAILURE_STATUS.get(result.failure, status.HTTP_400_BAD_REQUEST),  # type: ignore[arg-type]
            content={"error": result.error},
        )
    return CheckoutSessionResponseDTO(session_id=result.session_id)  # type: ignore[arg-type]


@router.get(
    "/payment/success",
    response_model=PaymentSuccessResponseDTO,
    summary="Return point after a completed checkout",
    responses={422: {"model": ErrorResponse, "description": "No session id"}},
)
def payment_success(session_id: str | None = None) -> PaymentSuccessResponseDTO:
    if not session_id:
        raise ValidationError(
            errors=[
                {
                    "field": "session_id",
                    "message": "No session ID found. Payment confirmation is unclear.",
                    "code": "REQUIRED",
                }
            ]
        )
    return PaymentSuccessResponseDTO(session_id=session_id)


@router.get(
    "/payment/cancel",
    response_model=PaymentCancelResponseDTO,
    summary="Return point after an abandoned checkout",
)
def payment_cancel(car_id: str | None = None) -> PaymentCancelResponseDTO:
    return PaymentCancelResponseDTO(
        car_id=car_id or None,
        message="Your payment was cancelled. You have not been charged.",
    )
