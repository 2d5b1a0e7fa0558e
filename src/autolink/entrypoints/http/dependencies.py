"""
Dependency injection for FastAPI routes.

The listing store and the settings are owned by the app instance (app.state),
never by a module global.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import Depends, Request

from autolink.adapters.local_photo_storage import LocalPhotoStorage
from autolink.adapters.openai_price_suggester import OpenAIPriceSuggester
from autolink.adapters.stripe_payment_gateway import StripePaymentGateway
from autolink.domain.errors import ConfigurationError
from autolink.infra.config.settings import Settings
from autolink.ports.listing_repository import ListingRepository
from autolink.ports.payment_gateway import PaymentGateway
from autolink.ports.photo_storage import PhotoStorage
from autolink.ports.price_suggester import PriceSuggester
from autolink.use_cases.create_checkout_session import CreateCheckoutSession
from autolink.use_cases.get_catalog_facets import GetCatalogFacets
from autolink.use_cases.get_listing_by_id import GetListingById
from autolink.use_cases.search_listings import SearchListings
from autolink.use_cases.submit_listing import SubmitListing
from autolink.use_cases.suggest_price import SuggestPrice


def get_listing_repository(request: Request) -> ListingRepository:
    """The store created by build_app() for this application instance."""
    return request.app.state.listing_repository


def get_app_settings(request: Request) -> Settings:
    """The settings this application instance was built with."""
    return request.app.state.settings


def get_photo_storage(settings: Settings = Depends(get_app_settings)) -> PhotoStorage:
    return LocalPhotoStorage(
        upload_dir=Path(settings.upload_dir),
        public_prefix=settings.upload_public_prefix,
    )


def get_price_suggester(settings: Settings = Depends(get_app_settings)) -> PriceSuggester:
    """
    Raises:
        ConfigurationError: If OPENAI_API_KEY is not set (feature disabled → 503)
    """
    if not settings.price_suggestions_enabled:
        raise ConfigurationError(
            "Price suggestions are unavailable because OPENAI_API_KEY is not configured."
        )
    return OpenAIPriceSuggester(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        timeout_seconds=settings.openai_timeout_seconds,
    )


def get_payment_gateway(settings: Settings = Depends(get_app_settings)) -> PaymentGateway | None:
    """None when Stripe is not configured; the use case reports it as {error}."""
    if not settings.payments_enabled:
        return None
    return StripePaymentGateway(
        secret_key=settings.stripe_secret_key,
        timeout_seconds=settings.stripe_timeout_seconds,
    )


def get_search_listings_use_case(
    repository: ListingRepository = Depends(get_listing_repository),
) -> SearchListings:
    return SearchListings(listing_repository=repository)


def get_get_listing_by_id_use_case(
    repository: ListingRepository = Depends(get_listing_repository),
) -> GetListingById:
    return GetListingById(listing_repository=repository)


def get_catalog_facets_use_case(
    repository: ListingRepository = Depends(get_listing_repository),
) -> GetCatalogFacets:
    return GetCatalogFacets(listing_repository=repository)


def get_submit_listing_use_case(
    repository: ListingRepository = Depends(get_listing_repository),
    photo_storage: PhotoStorage = Depends(get_photo_storage),
) -> SubmitListing:
    return SubmitListing(listing_repository=repository, photo_storage=photo_storage)


def get_suggest_price_use_case(
    price_suggester: PriceSuggester = Depends(get_price_suggester),
) -> SuggestPrice:
    return SuggestPrice(price_suggester=price_suggester)


def get_create_checkout_session_use_case(
    payment_gateway: PaymentGateway | None = Depends(get_payment_gateway),
    settings: Settings = Depends(get_app_settings),
) -> CreateCheckoutSession:
    return CreateCheckoutSession(payment_gateway=payment_gateway, app_url=settings.app_url)
