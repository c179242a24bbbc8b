"""Car listing CRUD routes."""

from typing import Any, Optional, Union
from uuid import uuid4

from fastapi import APIRouter, Body, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from car_catalog.adapters.inbound.http.schemas import ErrorResponse
from car_catalog.application.dtos.car import Car, validate_car_payload
from car_catalog.application.ports.car_repository import CarRepository
from car_catalog.domain.errors import InvalidCarDataError, InvalidOperationError
from car_catalog.infrastructure.logging.logger import log_car_operation, logger
from car_catalog.infrastructure.wiring.dependencies import get_car_repository

router = APIRouter(prefix="/api/cars", tags=["cars"])

_ERROR_RESPONSES: dict[Union[int, str], dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def _error(
    status_code: int, error: str, details: Optional[Union[str, list[str]]] = None
) -> JSONResponse:
    """Build an error response body with an optional details field."""
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


def _serialize(car: Car) -> dict[str, Any]:
    return car.model_dump(mode="json", by_alias=True)


def _not_found(car_id: str) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, f"Car with ID {car_id} not found")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@router.get("", responses=_ERROR_RESPONSES)
async def get_all_cars(repository: CarRepository = Depends(get_car_repository)) -> Response:
    """
    Retrieve all car listings.

    Returns:
        200 with the list of listings
    """
    request_id = str(uuid4())
    try:
        cars = await repository.get_all()
    except InvalidOperationError as e:
        log_car_operation(request_id, "get_all", status.HTTP_400_BAD_REQUEST, error=str(e))
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid operation", str(e))
    except Exception as e:
        logger.exception(f"Unexpected error while retrieving cars (request_id={request_id})")
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An error occurred while retrieving cars",
            str(e),
        )

    log_car_operation(request_id, "get_all", status.HTTP_200_OK, results_count=len(cars))
    return JSONResponse(status_code=status.HTTP_200_OK, content=[_serialize(car) for car in cars])


@router.get("/{car_id}", name="get_car_by_id", responses=_ERROR_RESPONSES)
async def get_car_by_id(
    car_id: str, repository: CarRepository = Depends(get_car_repository)
) -> Response:
    """
    Retrieve a single listing by its identifier.

    Args:
        car_id: Listing identifier

    Returns:
        200 with the listing, 400 for a blank ID, 404 if not found
    """
    request_id = str(uuid4())
    try:
        if _is_blank(car_id):
            log_car_operation(request_id, "get_by_id", status.HTTP_400_BAD_REQUEST)
            return _error(status.HTTP_400_BAD_REQUEST, "ID cannot be empty")

        car = await repository.get_by_id(car_id)
        if car is None:
            log_car_operation(request_id, "get_by_id", status.HTTP_404_NOT_FOUND, car_id=car_id)
            return _not_found(car_id)
    except InvalidOperationError as e:
        log_car_operation(
            request_id, "get_by_id", status.HTTP_400_BAD_REQUEST, car_id=car_id, error=str(e)
        )
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid operation", str(e))
    except Exception as e:
        logger.exception(f"Unexpected error while retrieving car {car_id} (request_id={request_id})")
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An error occurred while retrieving the car",
            str(e),
        )

    log_car_operation(request_id, "get_by_id", status.HTTP_200_OK, car_id=car_id)
    return JSONResponse(status_code=status.HTTP_200_OK, content=_serialize(car))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
async def create_car(
    request: Request,
    payload: Any = Body(default=None),
    repository: CarRepository = Depends(get_car_repository),
) -> Response:
    """
    Create a new listing.

    A missing or blank ``id`` in the payload is replaced by a generated one.

    Returns:
        201 with the created listing and a Location header pointing at it
    """
    request_id = str(uuid4())
    try:
        if payload is None:
            log_car_operation(request_id, "create", status.HTTP_400_BAD_REQUEST)
            return _error(status.HTTP_400_BAD_REQUEST, "Car data is required")

        car, errors = validate_car_payload(payload)
        if car is None:
            log_car_operation(request_id, "create", status.HTTP_400_BAD_REQUEST, errors=errors)
            return _error(status.HTTP_400_BAD_REQUEST, "Validation failed", errors)

        location = str(request.url_for("get_car_by_id", car_id=car.id))
        await repository.add(car)
    except InvalidCarDataError as e:
        log_car_operation(request_id, "create", status.HTTP_400_BAD_REQUEST, error=str(e))
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid car data", str(e))
    except Exception as e:
        logger.exception(f"Unexpected error while creating car (request_id={request_id})")
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An error occurred while creating the car",
            str(e),
        )

    log_car_operation(request_id, "create", status.HTTP_201_CREATED, car_id=car.id)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=_serialize(car),
        headers={"Location": location},
    )


@router.put(
    "/{car_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_ERROR_RESPONSES,
)
async def update_car(
    car_id: str,
    payload: Any = Body(default=None),
    repository: CarRepository = Depends(get_car_repository),
) -> Response:
    """
    Replace an existing listing.

    The path identifier always wins over any ``id`` in the payload.

    Returns:
        204 on success, 400 for a blank ID or invalid body, 404 if not found
    """
    request_id = str(uuid4())
    try:
        if _is_blank(car_id):
            log_car_operation(request_id, "update", status.HTTP_400_BAD_REQUEST)
            return _error(status.HTTP_400_BAD_REQUEST, "ID cannot be empty")

        if payload is None:
            log_car_operation(request_id, "update", status.HTTP_400_BAD_REQUEST, car_id=car_id)
            return _error(status.HTTP_400_BAD_REQUEST, "Car data is required")

        if not await repository.exists(car_id):
            log_car_operation(request_id, "update", status.HTTP_404_NOT_FOUND, car_id=car_id)
            return _not_found(car_id)

        if isinstance(payload, dict):
            # The path ID replaces the body ID, so the body ID is not validated
            payload = {key: value for key, value in payload.items() if key != "id"}

        car, errors = validate_car_payload(payload)
        if car is None:
            log_car_operation(
                request_id, "update", status.HTTP_400_BAD_REQUEST, car_id=car_id, errors=errors
            )
            return _error(status.HTTP_400_BAD_REQUEST, "Validation failed", errors)

        await repository.update(car.model_copy(update={"id": car_id}))
    except InvalidCarDataError as e:
        log_car_operation(
            request_id, "update", status.HTTP_400_BAD_REQUEST, car_id=car_id, error=str(e)
        )
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid car data", str(e))
    except Exception as e:
        logger.exception(f"Unexpected error while updating car {car_id} (request_id={request_id})")
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An error occurred while updating the car",
            str(e),
        )

    log_car_operation(request_id, "update", status.HTTP_204_NO_CONTENT, car_id=car_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{car_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_ERROR_RESPONSES)
async def delete_car(
    car_id: str, repository: CarRepository = Depends(get_car_repository)
) -> Response:
    """
    Delete an existing listing.

    Returns:
        204 on success, 400 for a blank ID, 404 if not found
    """
    request_id = str(uuid4())
    try:
        if _is_blank(car_id):
            log_car_operation(request_id, "delete", status.HTTP_400_BAD_REQUEST)
            return _error(status.HTTP_400_BAD_REQUEST, "ID cannot be empty")

        if not await repository.exists(car_id):
            log_car_operation(request_id, "delete", status.HTTP_404_NOT_FOUND, car_id=car_id)
            return _not_found(car_id)

        await repository.delete(car_id)
    except InvalidOperationError as e:
        log_car_operation(
            request_id, "delete", status.HTTP_400_BAD_REQUEST, car_id=car_id, error=str(e)
        )
        return _error(status.HTTP_400_BAD_REQUEST, "Cannot delete car", str(e))
    except Exception as e:
        logger.exception(f"Unexpected error while deleting car {car_id} (request_id={request_id})")
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An error occurred while deleting the car",
            str(e),
        )

    log_car_operation(request_id, "delete", status.HTTP_204_NO_CONTENT, car_id=car_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
