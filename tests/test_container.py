"""Tests for container wiring."""

import asyncio

import pytest

from meal_choice.config import parse_timezone
from meal_choice.containers import build_container
from meal_choice.domain.models import AuthUser


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.catalog_service is not None
    assert container.preferences_service is not None
    asyncio.run(container.close_resources())


def test_container_dashboards_use_configured_timezone(settings, user: AuthUser) -> None:
    settings.timezone = "Europe/Berlin"
    container = build_container(settings)

    dashboard = container.dashboards.get(user)

    assert str(dashboard.tz) == "Europe/Berlin"
    assert container.dashboards.get(user) is dashboard


def test_parse_timezone_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        parse_timezone("Mars/Olympus_Mons")
    with pytest.raises(ValueError):
        parse_timezone("  ")
