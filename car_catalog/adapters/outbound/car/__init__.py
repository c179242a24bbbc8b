"""Car repository adapters."""

from car_catalog.adapters.outbound.car.in_memory_car_repository import InMemoryCarRepository
from car_catalog.adapters.outbound.car.postgres_car_repository import PostgresCarRepository

__all__ = [
    "InMemoryCarRepository",
    "PostgresCarRepository",
]
