"""Liked cars tracker."""

from typing import Callable

from car_catalog.domain.entities.matched_car import MatchedCar

ChangeListener = Callable[[], None]


class CarService:
    """
    Holds the cars a user has liked and notifies listeners when the set changes.

    State is process-local and lost on restart. Listeners are called
    synchronously, in registration order, with no arguments. The service is not
    thread-safe; callers sharing it across threads must synchronize access.
    """

    def __init__(self) -> None:
        """Initialize an empty liked set."""
        self._matched_cars: list[MatchedCar] = []
        self._listeners: list[ChangeListener] = []

    @property
    def matched_cars(self) -> list[MatchedCar]:
        """Liked cars in the order they were added."""
        return self._matched_cars.copy()

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """
        Register a change listener.

        Args:
            listener: Callable invoked after every change

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add_match(self, car: MatchedCar) -> bool:
        """
        Add a car to the liked set unless one with the same ID is already there.

        Args:
            car: Car to add

        Returns:
            True if the car was added, False if it was already liked
        """
        if any(existing.id == car.id for existing in self._matched_cars):
            return False

        self._matched_cars.append(car)
        self._notify()
        return True

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
