"""In-memory car repository adapter."""

from typing import Optional

from car_catalog.application.dtos.car import Car
from car_catalog.application.ports.car_repository import CarRepository
from car_catalog.domain.errors import InvalidCarDataError, InvalidOperationError


class InMemoryCarRepository(CarRepository):
    """In-memory implementation of car repository."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        # dicts keep insertion order, so listings come back in the order they were added
        self._storage: dict[str, Car] = {}

    async def get_all(self) -> list[Car]:
        """
        Get all stored listings.

        Returns:
            List of listings in insertion order
        """
        return list(self._storage.values())

    async def get_by_id(self, car_id: str) -> Optional[Car]:
        """
        Get a listing by its identifier.

        Args:
            car_id: Listing identifier

        Returns:
            Car, or None if not found
        """
        return self._storage.get(car_id)

    async def add(self, car: Car) -> None:
        """
        Store a new listing.

        Args:
            car: Listing to store

        Raises:
            InvalidCarDataError: If a listing with the same ID already exists
        """
        if car.id in self._storage:
            raise InvalidCarDataError(f"Car with ID {car.id} already exists")
        self._storage[car.id] = car

    async def update(self, car: Car) -> None:
        """
        Replace a stored listing.

        Args:
            car: Listing with updated fields

        Raises:
            InvalidOperationError: If no listing with this ID is stored
        """
        if car.id not in self._storage:
            raise InvalidOperationError(f"Car with ID {car.id} does not exist")
        self._storage[car.id] = car

    async def delete(self, car_id: str) -> None:
        """
        Remove a listing.

        Args:
            car_id: Listing identifier

        Raises:
            InvalidOperationError: If no listing with this ID is stored
        """
        if car_id not in self._storage:
            raise InvalidOperationError(f"Car with ID {car_id} does not exist")
        del self._storage[car_id]

    async def exists(self, car_id: str) -> bool:
        """
        Check whether a listing exists.

        Args:
            car_id: Listing identifier

        Returns:
            True if stored
        """
        return car_id in self._storage
