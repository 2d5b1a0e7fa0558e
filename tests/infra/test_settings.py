"""Tests for application settings, logging setup and seed data."""

from __future__ import annotations

import logging

import pytest

from autolink.infra.config.settings import Settings
from autolink.infra.logger import ROOT_LOGGER_NAME, configure_logging
from autolink.infra.seed import SEED_LISTINGS, seed_listings


def test_defaults_disable_optional_features(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STRIPE_SECRET_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    settings = Settings(_env_file=None)

    assert settings.payments_enabled is False
    assert settings.price_suggestions_enabled is False
    assert settings.upload_public_prefix == "/images/uploads"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_123")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-openai")
    monkeypatch.setenv("APP_URL", "https://shop.test")
    monkeypatch.setenv("STRIPE_TIMEOUT_SECONDS", "5")

    settings = Settings(_env_file=None)

    assert settings.payments_enabled is True
    assert settings.price_suggestions_enabled is True
    assert settings.app_url == "https://shop.test"
    assert settings.stripe_timeout_seconds == 5


def test_configure_logging_adds_one_handler() -> None:
    logger = configure_logging("debug")
    configure_logging("warning")

    assert logger.name == ROOT_LOGGER_NAME
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_seed_listings_are_unique_and_fresh() -> None:
    first = seed_listings()
    first.clear()

    assert len(seed_listings()) == 6
    assert len({listing.id for listing in SEED_LISTINGS}) == 6
