"""Car listing DTOs and validation."""

from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Optional
from uuid import uuid4

from pydantic import ConfigDict, Field, PlainSerializer, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from car_catalog.application.dtos.base import DTO


class FuelCategory(str, Enum):
    """Fuel type of a listed car."""

    PETROL = "Petrol"
    DIESEL = "Diesel"
    ELECTRIC = "Electric"
    HYBRID = "Hybrid"
    PLUG_IN_HYBRID = "PlugInHybrid"


class TransmissionCategory(str, Enum):
    """Transmission type of a listed car."""

    MANUAL = "Manual"
    AUTOMATIC = "Automatic"
    SEMI_AUTOMATIC = "SemiAutomatic"


class BodyCategory(str, Enum):
    """Body style of a listed car."""

    SEDAN = "Sedan"
    ESTATE = "Estate"
    HATCHBACK = "Hatchback"
    SUV = "SUV"
    COUPE = "Coupe"
    MINIVAN = "Minivan"


# Price is kept as Decimal internally but rendered as a JSON number
Price = Annotated[
    Decimal,
    Field(ge=100, le=1_000_000),
    PlainSerializer(float, return_type=float, when_used="json"),
]

# Listing IDs appear in URL paths and in a String(36) column
CAR_ID_PATTERN = r"^[A-Za-z0-9_-]+$"

REQUIRED_TEXT_FIELDS = ("brand", "model", "primary_image_path", "location", "contact_info")


def _new_car_id() -> str:
    return str(uuid4())


class Car(DTO):
    """Vehicle listing stored and served by the catalog."""

    id: str = Field(default_factory=_new_car_id, max_length=36, pattern=CAR_ID_PATTERN)
    brand: str = Field(max_length=50)
    model: str = Field(max_length=50)
    production_year: int = Field(ge=1980, le=2026)
    fuel_type: FuelCategory
    transmission: TransmissionCategory
    body_type: BodyCategory
    engine_power_kw: int = Field(ge=1, le=1500, alias="enginePowerKW")
    fuel_consumption_liters_per_100km: Optional[Annotated[float, Field(ge=0.1, le=50)]] = Field(
        default=None, alias="fuelConsumptionLitersPer100Km"
    )
    energy_consumption_kwh_per_100km: Optional[Annotated[float, Field(ge=0.1, le=100)]] = Field(
        default=None, alias="energyConsumptionKWhPer100Km"
    )
    price: Price
    mileage_km: int = Field(ge=0, le=1_000_000)
    primary_image_path: str = Field(max_length=500)
    additional_image_paths: list[str] = Field(default_factory=list)
    description: Optional[Annotated[str, Field(min_length=10, max_length=1000)]] = None
    features: list[str] = Field(default_factory=list)
    location: str = Field(max_length=100)
    contact_info: str = Field(max_length=100)
    vin: Optional[Annotated[str, Field(min_length=17, max_length=17)]] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "brand": "Audi",
                "model": "A6",
                "productionYear": 2020,
                "fuelType": "Diesel",
                "transmission": "Automatic",
                "bodyType": "Estate",
                "enginePowerKW": 150,
                "fuelConsumptionLitersPer100Km": 5.8,
                "price": 32500.0,
                "mileageKm": 85000,
                "primaryImagePath": "images/audi-a6/front.jpg",
                "additionalImagePaths": ["images/audi-a6/interior.jpg"],
                "description": "Well maintained, full service history.",
                "features": ["Heated seats", "Adaptive cruise control"],
                "location": "Vilnius",
                "contactInfo": "+37060000000",
                "vin": "WAUZZZ4G0EN123456",
            }
        },
    )

    @field_validator("id", mode="before")
    @classmethod
    def _generate_missing_id(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return _new_car_id()
        return value

    @field_validator(*REQUIRED_TEXT_FIELDS)
    @classmethod
    def _reject_blank_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("value must not be blank")
        return value

    @field_validator("additional_image_paths", "features", mode="before")
    @classmethod
    def _null_list_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


# Messages reported per field: (missing/blank message, constraint message).
# Optional fields only carry a constraint message.
FIELD_MESSAGES: dict[str, tuple[Optional[str], str]] = {
    "brand": ("Brand is required", "Brand must not exceed 50 characters"),
    "model": ("Model is required", "Model must not exceed 50 characters"),
    "production_year": ("Production year is required", "Please enter a valid production year"),
    "fuel_type": (
        "Fuel type is required",
        "Fuel type must be one of: " + ", ".join(item.value for item in FuelCategory),
    ),
    "transmission": (
        "Transmission type is required",
        "Transmission type must be one of: "
        + ", ".join(item.value for item in TransmissionCategory),
    ),
    "body_type": (
        "Body type is required",
        "Body type must be one of: " + ", ".join(item.value for item in BodyCategory),
    ),
    "engine_power_kw": ("Engine power is required", "Power must be between 1 and 1500 kW"),
    "fuel_consumption_liters_per_100km": (
        None,
        "Fuel consumption must be between 0.1 and 50",
    ),
    "energy_consumption_kwh_per_100km": (
        None,
        "Energy consumption must be between 0.1 and 100",
    ),
    "price": ("Price is required", "Price must be between €100 and €1,000,000"),
    "mileage_km": ("Mileage is required", "Mileage must be between 0 and 1,000,000 km"),
    "primary_image_path": ("Car image is required", "Image path must not exceed 500 characters"),
    "additional_image_paths": (None, "Additional images must be a list of paths"),
    "description": (None, "Description must be between 10 and 1000 characters"),
    "features": (None, "Features must be a list of text entries"),
    "location": ("Location is required", "Location must not exceed 100 characters"),
    "contact_info": (
        "Contact information is required",
        "Contact information must not exceed 100 characters",
    ),
    "vin": (None, "VIN must be exactly 17 characters"),
    "id": (None, "ID must be at most 36 letters, digits, hyphens or underscores"),
}


def _field_name_for(location: str) -> Optional[str]:
    """Resolve a pydantic error location (alias or attribute name) to a field name."""
    for name, field in Car.model_fields.items():
        if location in (name, field.alias):
            return name
    return None


def _is_missing(error: dict[str, Any]) -> bool:
    if error["type"] == "missing":
        return True
    value = error.get("input")
    return value is None or (isinstance(value, str) and not value.strip())


def validate_car_payload(data: Any) -> tuple[Optional[Car], list[str]]:
    """
    Validate a raw request payload against the Car constraints.

    Every violated field is reported once, in field declaration order.

    Args:
        data: Decoded JSON body

    Returns:
        Tuple of (Car, []) when valid, or (None, messages) when invalid
    """
    if not isinstance(data, dict):
        return None, ["Car data must be a JSON object"]

    try:
        return Car.model_validate(data), []
    except ValidationError as exc:
        errors = exc.errors()

    failed: dict[str, str] = {}
    for error in errors:
        if not error["loc"]:
            continue
        name = _field_name_for(str(error["loc"][0]))
        if name is None or name in failed:
            continue
        required_message, constraint_message = FIELD_MESSAGES[name]
        if required_message is not None and _is_missing(error):
            failed[name] = required_message
        else:
            failed[name] = constraint_message

    return None, [failed[name] for name in Car.model_fields if name in failed]
