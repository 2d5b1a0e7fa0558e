"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "description",
                "message": "Description must be at least 10 characters",
                "code": "TOO_SHORT",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Listing with identifier '42' not found",
                "code": "NOT_FOUND"
            }

        Validation error with multiple fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "price",
                        "message": "Price must be greater than 0",
                        "code": "INVALID_VALUE"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Listing with identifier '42' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "price",
                            "message": "Price must be greater than 0",
                            "code": "INVALID_VALUE",
                        },
                        {
                            "field": "photo",
                            "message": "Only JPG, PNG, WEBP allowed",
                            "code": "INVALID_CONTENT_TYPE",
                        },
                    ],
                },
            ]
        }
    )


class CheckoutErrorResponse(BaseModel):
    """Checkout failures keep the {error} shape whatever the cause."""

    error: str

    model_config = ConfigDict(
        json_schema_extra={"example": {"error": "Invalid car price for checkout."}}
    )
