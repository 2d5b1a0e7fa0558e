from pydantic import BaseModel, Field


class CheckoutSessionResponseDTO(BaseModel):
    session_id: str = Field(description="Hosted checkout session id to redirect the buyer to")


class PaymentSuccessResponseDTO(BaseModel):
    status: str = "success"
    session_id: str


class PaymentCancelResponseDTO(BaseModel):
    status: str = "cancelled"
    car_id: str | None = None
    message: str
