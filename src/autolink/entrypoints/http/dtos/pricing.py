from pydantic import BaseModel, ConfigDict, Field


class PriceSuggestionRequestDTO(BaseModel):
    """Vehicle description sent to the price suggestion service."""

    make: str = Field(min_length=1, examples=["Toyota"])
    model: str = Field(min_length=1, examples=["Camry"])
    year: int = Field(examples=[2020])
    mileage: int = Field(ge=0, examples=[30000])
    condition: str = Field(
        description="Free text; mapped onto new / used - like new / used - good / "
        "used - fair / used - poor",
        examples=["Like new, garage kept"],
    )
    additional_details: str | None = Field(default=None, examples=["Single owner"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "make": "Toyota",
                "model": "Camry",
                "year": 2020,
                "mileage": 30000,
                "condition": "used - good",
                "additional_details": "Single owner, full service history",
            }
        }
    )


class PriceSuggestionResponseDTO(BaseModel):
    suggested_price: str = Field(description="US dollars as decimal string", examples=["24500.00"])
    reasoning: str
    condition: str = Field(description="Condition value the suggestion was computed for")
