"""Dependency injection factory functions."""

from functools import lru_cache

from car_catalog.adapters.outbound.car import InMemoryCarRepository, PostgresCarRepository
from car_catalog.application.ports.car_repository import CarRepository
from car_catalog.application.services.car_service import CarService
from car_catalog.infrastructure.config.settings import settings


def create_car_repository() -> CarRepository:
    """
    Factory function to create car repository.

    Returns:
        CarRepository instance

    Raises:
        ValueError: If the postgres repository is selected without DATABASE_URL
    """
    if settings.car_repository == "postgres":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when CAR_REPOSITORY=postgres")
        return PostgresCarRepository()
    else:
        return InMemoryCarRepository()


@lru_cache(maxsize=1)
def get_car_repository() -> CarRepository:
    """
    FastAPI dependency returning the process-wide car repository.

    Returns:
        CarRepository instance
    """
    return create_car_repository()


@lru_cache(maxsize=1)
def get_car_service() -> CarService:
    """
    FastAPI dependency returning the process-wide liked cars tracker.

    Returns:
        CarService instance
    """
    return CarService()
