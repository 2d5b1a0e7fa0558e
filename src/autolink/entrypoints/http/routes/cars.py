from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from autolink.entrypoints.http.dependencies import (
    get_catalog_facets_use_case,
    get_get_listing_by_id_use_case,
    get_search_listings_use_case,
    get_submit_listing_use_case,
)
from autolink.entrypoints.http.dtos.listings import (
    CatalogFacetsResponseDTO,
    ListingCreatedResponseDTO,
    ListingResponseDTO,
    ListingsSearchQueryDTO,
)
from autolink.entrypoints.http.error_responses import ErrorResponse
from autolink.entrypoints.http.mappers.listing_mapper import ListingMapper
from autolink.use_cases.get_catalog_facets import GetCatalogFacets
from autolink.use_cases.get_listing_by_id import GetListingById, GetListingByIdRequest
from autolink.use_cases.search_listings import SearchListings
from autolink.use_cases.submit_listing import SubmitListing


router = APIRouter(tags=["Cars"])


@router.get(
    "/cars",
    response_model=list[ListingResponseDTO],
    summary="Browse listings",
    description="""
    List every listing, newest first, optionally narrowed by filters.

    ## Filters
    - All filters use AND semantics
    - make/model: case-insensitive exact match
    - year/price: inclusive ranges
    - A bound that is empty or not a number is ignored

    ## Example
    ```
    GET /v1/cars?make=Honda&price_max=35000
    ```
    """,
)
def get_cars(
    query: ListingsSearchQueryDTO = Depends(),
    use_case: SearchListings = Depends(get_search_listings_use_case),
) -> list[ListingResponseDTO]:
    """Parse → execute → map → return."""
    request = ListingMapper.to_search_request(query)

    result = use_case.execute(request)

    return ListingMapper.to_search_response(result)


@router.get(
    "/cars/facets",
    response_model=CatalogFacetsResponseDTO,
    summary="Makes, models and years for the filter and sell forms",
)
def get_car_facets(
    use_case: GetCatalogFacets = Depends(get_catalog_facets_use_case),
) -> CatalogFacetsResponseDTO:
    return ListingMapper.to_facets_response(use_case.execute())


@router.get(
    "/cars/{listing_id}",
    response_model=ListingResponseDTO,
    summary="Get a single listing",
    responses={404: {"model": ErrorResponse, "description": "Listing not found"}},
)
def get_car(
    listing_id: str,
    use_case: GetListingById = Depends(get_get_listing_by_id_use_case),
) -> ListingResponseDTO:
    result = use_case.execute(GetListingByIdRequest(listing_id=listing_id))

    return ListingMapper.to_listing_response(result.listing)


@router.post(
    "/cars",
    response_model=ListingCreatedResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a new listing",
    description="""
    Create a listing from a multipart form with at most one photo.

    ## Required fields
    make, model, year, price (> 0), mileage (>= 0), condition, description
    (at least 10 characters)

    ## Optional fields
    additionalDetails, engine, transmission, fuelType, exteriorColor,
    interiorColor, vin, featured ("true" to feature)

    ## Photo
    - Optional file part `photoFile`; JPG, PNG or WEBP up to 5 MB
    - Without a photo (or if saving it fails) a placeholder image is used
    """,
    responses={
        409: {"model": ErrorResponse, "description": "Identifier collision"},
        422: {"model": ErrorResponse, "description": "Field validation failed"},
    },
)
def create_car(
    make: str | None = Form(default=None),
    model: str | None = Form(default=None),
    year: str | None = Form(default=None),
    price: str | None = Form(default=None),
    mileage: str | None = Form(default=None),
    condition: str | None = Form(default=None),
    description: str | None = Form(default=None),
    additional_details: str | None = Form(default=None, alias="additionalDetails"),
    engine: str | None = Form(default=None),
    transmission: str | None = Form(default=None),
    fuel_type: str | None = Form(default=None, alias="fuelType"),
    exterior_color: str | None = Form(default=None, alias="exteriorColor"),
    interior_color: str | None = Form(default=None, alias="interiorColor"),
    vin: str | None = Form(default=None),
    featured: str | None = Form(default=None),
    photo: UploadFile | None = File(default=None, alias="photoFile"),
    use_case: SubmitListing = Depends(get_submit_listing_use_case),
) -> ListingCreatedResponseDTO:
    upload = None
    if photo is not None:
        upload = ListingMapper.to_photo_upload(photo.filename, photo.content_type, photo.file)

    request = ListingMapper.to_submit_request(
        {
            "make": make,
            "model": model,
            "year": year,
            "price": price,
            "mileage": mileage,
            "condition": condition,
            "description": description,
            "additional_details": additional_details,
            "engine": engine,
            "transmission": transmission,
            "fuel_type": fuel_type,
            "exterior_color": exterior_color,
            "interior_color": interior_color,
            "vin": vin,
            "featured": featured,
        },
        upload,
    )

    result = use_case.execute(request)

    return ListingMapper.to_created_response(result)
