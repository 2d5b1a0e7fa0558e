from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from autolink.domain.listing import Listing, ListingFilters


def filter_listings(listings: Iterable[Listing], filters: ListingFilters) -> list[Listing]:
    """
    Return the listings matching every present filter, in input order.

    - make/model: case-insensitive exact match
    - year/price: inclusive bounds
    - featured: exact match
    - listings without a price never satisfy a price bound

    No cross-field validation happens here (a min above its max simply
    matches nothing).
    """
    if filters.is_empty:
        return list(listings)
    return [listing for listing in listings if matches(listing, filters)]


def matches(listing: Listing, filters: ListingFilters) -> bool:
    if filters.make and listing.make.lower() != filters.make.lower():
        return False
    if filters.model and listing.model.lower() != filters.model.lower():
        return False
    if filters.year_min is not None and listing.year < filters.year_min:
        return False
    if filters.year_max is not None and listing.year > filters.year_max:
        return False
    if filters.price_min is not None and (
        listing.price is None or listing.price < filters.price_min
    ):
        return False
    if filters.price_max is not None and (
        listing.price is None or listing.price > filters.price_max
    ):
        return False
    if filters.featured is not None and listing.featured != filters.featured:
        return False
    return True


@dataclass(frozen=True, slots=True)
class CatalogFacets:
    """Values offered by the browse and sell forms' select boxes."""

    makes: list[str]
    models_by_make: dict[str, list[str]]
    years: list[int]


def build_facets(listings: Iterable[Listing]) -> CatalogFacets:
    """Distinct makes and models in first-seen order, years newest first."""
    models_by_make: dict[str, list[str]] = {}
    years: set[int] = set()
    for listing in listings:
        models = models_by_make.setdefault(listing.make, [])
        if listing.model not in models:
            models.append(listing.model)
        years.add(listing.year)

    return CatalogFacets(
        makes=list(models_by_make),
        models_by_make=models_by_make,
        years=sorted(years, reverse=True),
    )


@dataclass
class ListingFilterForm:
    """
    Browse-form state in front of the filter engine.

    Keeps the make/model pair consistent: choosing a make whose known
    models do not include the selected model clears the model, and
    clearing the make clears the model. Bounds are kept as typed text.
    """

    models_by_make: Mapping[str, Sequence[str]]
    make: str | None = None
    model: str | None = None
    year_min: str | None = None
    year_max: str | None = None
    price_min: str | None = None
    price_max: str | None = None
    featured: bool | None = None

    def available_models(self) -> list[str]:
        if not self.make:
            return []
        return list(self.models_by_make.get(self.make, ()))

    def select_make(self, make: str | None) -> None:
        self.make = make or None
        if self.make is None:
            self.model = None
        elif self.model and self.model not in self.available_models():
            self.model = None

    def select_model(self, model: str | None) -> None:
        self.model = model or None

    def reset(self) -> None:
        self.make = None
        self.model = None
        self.year_min = None
        self.year_max = None
        self.price_min = None
        self.price_max = None
        self.featured = None

    def to_filters(self) -> ListingFilters:
        return ListingFilters.from_raw(
            make=self.make,
            model=self.model,
            year_min=self.year_min,
            year_max=self.year_max,
            price_min=self.price_min,
            price_max=self.price_max,
            featured=self.featured,
        )
