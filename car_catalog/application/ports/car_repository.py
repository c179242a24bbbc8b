"""Car repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from car_catalog.application.dtos.car import Car


class CarRepository(ABC):
    """Port interface for car listing persistence."""

    @abstractmethod
    async def get_all(self) -> list[Car]:
        """
        Get all stored listings.

        Returns:
            List of listings, empty if none are stored
        """
        pass

    @abstractmethod
    async def get_by_id(self, car_id: str) -> Optional[Car]:
        """
        Get a listing by its identifier.

        Args:
            car_id: Listing identifier

        Returns:
            Car, or None if not found
        """
        pass

    @abstractmethod
    async def add(self, car: Car) -> None:
        """
        Persist a new listing. The identifier is already set by the caller.

        Args:
            car: Listing to store
        """
        pass

    @abstractmethod
    async def update(self, car: Car) -> None:
        """
        Replace the stored listing sharing the same identifier.

        Args:
            car: Listing with updated fields
        """
        pass

    @abstractmethod
    async def delete(self, car_id: str) -> None:
        """
        Remove the listing with the given identifier.

        Args:
            car_id: Listing identifier
        """
        pass

    @abstractmethod
    async def exists(self, car_id: str) -> bool:
        """
        Check whether a listing exists.

        Args:
            car_id: Listing identifier

        Returns:
            True if a listing with this identifier is stored
        """
        pass
