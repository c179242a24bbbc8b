"""Unit tests for dependency wiring."""

from unittest.mock import patch

import pytest

from car_catalog.adapters.outbound.car import InMemoryCarRepository, PostgresCarRepository
from car_catalog.infrastructure.config.settings import settings
from car_catalog.infrastructure.wiring.dependencies import (
    create_car_repository,
    get_car_repository,
    get_car_service,
)


def test_default_repository_is_in_memory():
    """Test that the in-memory repository is used by default."""
    with patch.object(settings, "car_repository", "in_memory"):
        assert isinstance(create_car_repository(), InMemoryCarRepository)


def test_postgres_repository_requires_database_url():
    """Test that selecting postgres without DATABASE_URL fails fast."""
    with patch.object(settings, "car_repository", "postgres"), patch.object(
        settings, "database_url", ""
    ):
        with pytest.raises(ValueError, match="DATABASE_URL"):
            create_car_repository()


def test_postgres_repository_selected():
    """Test that postgres is selected when configured."""
    with patch.object(settings, "car_repository", "postgres"), patch.object(
        settings, "database_url", "sqlite:///:memory:"
    ):
        assert isinstance(create_car_repository(), PostgresCarRepository)


def test_singletons_are_shared():
    """Test that the FastAPI dependencies return process-wide instances."""
    assert get_car_repository() is get_car_repository()
    assert get_car_service() is get_car_service()
