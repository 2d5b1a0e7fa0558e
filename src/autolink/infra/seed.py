"""
Starter inventory loaded into the listing store at process start.

Deterministic: the same six listings every run, ids "1".."6".
"""

from __future__ import annotations

from decimal import Decimal

from autolink.domain.listing import Condition, Listing

SEED_LISTINGS: tuple[Listing, ...] = (
    Listing(
        id="1",
        make="Toyota",
        model="Camry",
        year=2022,
        price=Decimal("28000"),
        mileage=15000,
        image_url="/images/cars/toyota-camry-main.png",
        featured=True,
        condition=Condition.USED_LIKE_NEW,
        description="A reliable and fuel-efficient sedan, perfect for daily commutes.",
        additional_details="Single owner, non-smoker, regular maintenance.",
        photos=(
            "/images/cars/toyota-camry-detail1.png",
            "/images/cars/toyota-camry-detail2.png",
        ),
        engine="2.5L I4",
        transmission="8-Speed Automatic",
        fuel_type="Gasoline",
        exterior_color="Celestial Silver Metallic",
        interior_color="Black",
        vin="123ABC456DEF789G",
    ),
    Listing(
        id="2",
        make="Honda",
        model="CR-V",
        year=2021,
        price=Decimal("32000"),
        mileage=22000,
        image_url="/images/cars/honda-crv-main.png",
        featured=True,
        condition=Condition.USED_GOOD,
        description="Spacious and versatile SUV with advanced safety features.",
        additional_details="Family-owned, great for road trips.",
        photos=("/images/cars/honda-crv-detail1.png",),
        engine="1.5L Turbo I4",
        transmission="CVT",
        fuel_type="Gasoline",
        exterior_color="Sonic Gray Pearl",
        interior_color="Gray",
    ),
    Listing(
        id="3",
        make="Ford",
        model="F-150",
        year=2020,
        price=Decimal("45000"),
        mileage=35000,
        image_url="/images/cars/ford-f150-main.png",
        condition=Condition.USED_GOOD,
        description="Powerful and rugged pickup truck, ready for any job.",
        additional_details="Towing package included.",
        engine="5.0L V8",
        transmission="10-Speed Automatic",
        fuel_type="Gasoline",
        exterior_color="Race Red",
        interior_color="Black",
    ),
    Listing(
        id="4",
        make="BMW",
        model="3 Series",
        year=2023,
        price=Decimal("52000"),
        mileage=5000,
        image_url="/images/cars/bmw-3series-main.png",
        featured=True,
        condition=Condition.NEW,
        description="Luxury sports sedan with exhilarating performance and cutting-edge tech.",
        additional_details="M Sport package, premium sound system.",
        engine="2.0L Turbo I4",
        transmission="8-Speed Automatic",
        fuel_type="Gasoline",
        exterior_color="Alpine White",
        interior_color="Cognac",
    ),
    Listing(
        id="5",
        make="Chevrolet",
        model="Tahoe",
        year=2019,
        price=Decimal("38000"),
        mileage=45000,
        image_url="/images/cars/chevrolet-tahoe-main.png",
        condition=Condition.USED_FAIR,
        description="Full-size SUV with plenty of room for passengers and cargo.",
        engine="5.3L V8",
        transmission="6-Speed Automatic",
        fuel_type="Gasoline",
        exterior_color="Black",
        interior_color="Jet Black",
    ),
    Listing(
        id="6",
        make="Nissan",
        model="Altima",
        year=2021,
        price=Decimal("23000"),
        mileage=28000,
        image_url="/images/cars/nissan-altima-main.png",
        featured=False,
        condition=Condition.USED_GOOD,
        description="Comfortable mid-size sedan with good fuel economy.",
        photos=("/images/cars/nissan-altima-detail1.png",),
        engine="2.5L I4",
        transmission="CVT",
        fuel_type="Gasoline",
        exterior_color="Gun Metallic",
        interior_color="Charcoal",
    ),
)


def seed_listings() -> list[Listing]:
    """Fresh list of the seed listings (listings themselves are immutable)."""
    return list(SEED_LISTINGS)
