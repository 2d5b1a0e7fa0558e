from pydantic import BaseModel, ConfigDict, Field


class ListingResponseDTO(BaseModel):
    id: str
    make: str
    model: str
    year: int
    price: str | None = Field(description="Decimal as string; null until priced")
    mileage: int
    condition: str
    description: str
    additional_details: str | None = None
    image_url: str
    photos: list[str] = Field(description="Detail photos; falls back to [image_url] when empty")
    featured: bool
    engine: str | None = None
    transmission: str | None = None
    fuel_type: str | None = None
    exterior_color: str | None = None
    interior_color: str | None = None
    vin: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "2",
                "make": "Honda",
                "model": "CR-V",
                "year": 2021,
                "price": "32000",
                "mileage": 22000,
                "condition": "used - good",
                "description": "Spacious and versatile SUV with advanced safety features.",
                "additional_details": "Family-owned, great for road trips.",
                "image_url": "/images/cars/honda-crv-main.png",
                "photos": ["/images/cars/honda-crv-detail1.png"],
                "featured": True,
                "engine": "1.5L Turbo I4",
                "transmission": "CVT",
                "fuel_type": "Gasoline",
                "exterior_color": "Sonic Gray Pearl",
                "interior_color": "Gray",
                "vin": None,
            }
        }
    )


class ListingsSearchQueryDTO(BaseModel):
    """
    Query parameters for browsing listings.

    Bounds are accepted as text: a bound that does not parse as a number is
    ignored instead of rejected.
    """

    make: str | None = Field(
        default=None,
        description="Filter by make (case-insensitive exact match)",
        examples=["Toyota"],
    )
    model: str | None = Field(
        default=None,
        description="Filter by model (case-insensitive exact match)",
        examples=["Camry"],
    )
    year_min: str | None = Field(
        default=None,
        description="Minimum year (inclusive)",
        examples=["2018"],
    )
    year_max: str | None = Field(
        default=None,
        description="Maximum year (inclusive)",
        examples=["2023"],
    )
    price_min: str | None = Field(
        default=None,
        description="Minimum price (inclusive, decimal as string)",
        examples=["20000.00"],
    )
    price_max: str | None = Field(
        default=None,
        description="Maximum price (inclusive, decimal as string)",
        examples=["35000.00"],
    )
    featured: bool | None = Field(
        default=None,
        description="Only featured (true) or non-featured (false) listings",
        examples=[True],
    )


class ListingCreatedResponseDTO(BaseModel):
    message: str
    car: ListingResponseDTO


class CatalogFacetsResponseDTO(BaseModel):
    makes: list[str]
    models_by_make: dict[str, list[str]]
    years: list[int]
