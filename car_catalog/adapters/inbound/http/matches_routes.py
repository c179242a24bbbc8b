"""Liked cars routes."""

from dataclasses import asdict
from uuid import uuid4

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from car_catalog.adapters.inbound.http.schemas import MatchedCarPayload
from car_catalog.application.services.car_service import CarService
from car_catalog.domain.entities.matched_car import MatchedCar
from car_catalog.infrastructure.logging.logger import log_request
from car_catalog.infrastructure.wiring.dependencies import get_car_service

router = APIRouter(prefix="/api/matches", tags=["matches"])


def _to_payload(car: MatchedCar) -> dict:
    return MatchedCarPayload(**asdict(car)).model_dump(by_alias=True)


@router.get("", status_code=status.HTTP_200_OK)
async def list_matches(car_service: CarService = Depends(get_car_service)) -> list[dict]:
    """
    List the liked cars in the order they were added.

    Returns:
        List of liked cars
    """
    return [_to_payload(car) for car in car_service.matched_cars]


@router.post("")
async def add_match(
    payload: MatchedCarPayload, car_service: CarService = Depends(get_car_service)
) -> JSONResponse:
    """
    Mark a car as liked.

    Args:
        payload: Car to add to the liked set

    Returns:
        201 when the car was added, 200 when it was already liked
    """
    car = MatchedCar(**payload.model_dump())
    added = car_service.add_match(car)

    log_request(str(uuid4()), "matches", car_id=car.id, added=added)

    return JSONResponse(
        status_code=status.HTTP_201_CREATED if added else status.HTTP_200_OK,
        content=_to_payload(car),
    )
