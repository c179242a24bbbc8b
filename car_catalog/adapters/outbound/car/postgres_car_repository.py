"""Postgres-backed car repository adapter."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from car_catalog.application.dtos.car import Car
from car_catalog.application.ports.car_repository import CarRepository
from car_catalog.domain.errors import InvalidCarDataError, InvalidOperationError
from car_catalog.infrastructure.db import get_db_session
from car_catalog.infrastructure.logging.logger import logger

from .models import CarModel

# Columns copied one-to-one between the DTO and the ORM model
_CAR_COLUMNS = (
    "brand",
    "model",
    "production_year",
    "fuel_type",
    "transmission",
    "body_type",
    "engine_power_kw",
    "fuel_consumption_liters_per_100km",
    "energy_consumption_kwh_per_100km",
    "price",
    "mileage_km",
    "primary_image_path",
    "additional_image_paths",
    "description",
    "features",
    "location",
    "contact_info",
    "vin",
)


class PostgresCarRepository(CarRepository):
    """Postgres implementation of car repository."""

    def _model_to_dto(self, model: CarModel) -> Car:
        """
        Convert CarModel to Car DTO.

        Args:
            model: SQLAlchemy model instance

        Returns:
            Car DTO
        """
        values = {column: getattr(model, column) for column in _CAR_COLUMNS}
        values["additional_image_paths"] = list(model.additional_image_paths or [])
        values["features"] = list(model.features or [])
        return Car(id=model.id, **values)

    def _apply_dto(self, car: Car, model: CarModel) -> CarModel:
        """
        Copy Car DTO fields onto a model instance.

        Args:
            car: Car DTO
            model: Model instance to update

        Returns:
            The updated model instance
        """
        for column in _CAR_COLUMNS:
            value = getattr(car, column)
            if column in ("fuel_type", "transmission", "body_type"):
                value = value.value
            elif column in ("additional_image_paths", "features"):
                value = list(value)
            setattr(model, column, value)
        return model

    async def get_all(self) -> list[Car]:
        """
        Get all stored listings.

        Returns:
            List of listings ordered by creation time
        """
        db: Session = get_db_session()
        try:
            models = db.query(CarModel).order_by(CarModel.created_at).all()
            return [self._model_to_dto(model) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing cars: {str(e)}")
            raise
        finally:
            db.close()

    async def get_by_id(self, car_id: str) -> Optional[Car]:
        """
        Get a listing by its identifier.

        Args:
            car_id: Listing identifier

        Returns:
            Car DTO, or None if not found
        """
        db: Session = get_db_session()
        try:
            model = db.get(CarModel, car_id)
            if model is None:
                return None
            return self._model_to_dto(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error while getting car {car_id}: {str(e)}")
            raise
        finally:
            db.close()

    async def add(self, car: Car) -> None:
        """
        Insert a new listing.

        Args:
            car: Car DTO to insert

        Raises:
            InvalidCarDataError: If the row violates a table constraint (e.g. duplicate ID)
        """
        db: Session = get_db_session()
        try:
            now = datetime.now(timezone.utc)
            model = self._apply_dto(car, CarModel(id=car.id, created_at=now, updated_at=now))
            db.add(model)
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise InvalidCarDataError(f"Car with ID {car.id} could not be stored") from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while adding car {car.id}: {str(e)}")
            raise
        finally:
            db.close()

    async def update(self, car: Car) -> None:
        """
        Replace the stored listing sharing the same identifier.

        Args:
            car: Car DTO with updated fields

        Raises:
            InvalidOperationError: If no row with this ID exists
        """
        db: Session = get_db_session()
        try:
            model = db.get(CarModel, car.id)
            if model is None:
                raise InvalidOperationError(f"Car with ID {car.id} does not exist")
            self._apply_dto(car, model)
            model.updated_at = datetime.now(timezone.utc)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while updating car {car.id}: {str(e)}")
            raise
        finally:
            db.close()

    async def delete(self, car_id: str) -> None:
        """
        Delete a listing.

        Args:
            car_id: Listing identifier

        Raises:
            InvalidOperationError: If no row with this ID exists
        """
        db: Session = get_db_session()
        try:
            model = db.get(CarModel, car_id)
            if model is None:
                raise InvalidOperationError(f"Car with ID {car_id} does not exist")
            db.delete(model)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while deleting car {car_id}: {str(e)}")
            raise
        finally:
            db.close()

    async def exists(self, car_id: str) -> bool:
        """
        Check whether a listing exists.

        Args:
            car_id: Listing identifier

        Returns:
            True if a row with this ID exists
        """
        db: Session = get_db_session()
        try:
            return db.query(CarModel.id).filter(CarModel.id == car_id).first() is not None
        except SQLAlchemyError as e:
            logger.error(f"Database error while checking car {car_id}: {str(e)}")
            raise
        finally:
            db.close()
