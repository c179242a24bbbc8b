"""Unit tests for car listing validation."""

from decimal import Decimal

from car_catalog.application.dtos.car import (
    BodyCategory,
    Car,
    FuelCategory,
    TransmissionCategory,
    validate_car_payload,
)


def test_valid_payload_builds_car(car_payload):
    """Test that a valid payload produces a Car and no errors."""
    car, errors = validate_car_payload(car_payload)

    assert errors == []
    assert car is not None
    assert car.brand == "Audi"
    assert car.production_year == 2020
    assert car.fuel_type == FuelCategory.DIESEL
    assert car.transmission == TransmissionCategory.AUTOMATIC
    assert car.body_type == BodyCategory.ESTATE
    assert car.engine_power_kw == 150
    assert car.price == Decimal("32500.5")
    assert car.additional_image_paths == [
        "images/audi-a6/interior.jpg",
        "images/audi-a6/rear.jpg",
    ]
    assert car.vin == "WAUZZZ4G0EN123456"


def test_id_is_generated_when_missing(car_payload):
    """Test that each new car gets a distinct generated ID."""
    first, _ = validate_car_payload(car_payload)
    second, _ = validate_car_payload(car_payload)

    assert first.id
    assert second.id
    assert first.id != second.id


def test_blank_id_is_replaced(car_payload):
    """Test that a blank ID in the payload is replaced by a generated one."""
    car_payload["id"] = "   "

    car, errors = validate_car_payload(car_payload)

    assert errors == []
    assert car.id.strip()


def test_supplied_id_is_kept(car_payload):
    """Test that a caller-supplied ID is preserved."""
    car_payload["id"] = "listing-42"

    car, _ = validate_car_payload(car_payload)

    assert car.id == "listing-42"


def test_id_longer_than_column_is_rejected(car_payload):
    """Test that a caller ID longer than 36 characters is a validation error."""
    car_payload["id"] = "a" * 40

    car, errors = validate_car_payload(car_payload)

    assert car is None
    assert errors == ["ID must be at most 36 letters, digits, hyphens or underscores"]


def test_generated_id_satisfies_id_constraint(car_payload):
    """Test that generated UUIDs pass the ID constraint when sent back."""
    car, _ = validate_car_payload(car_payload)

    again, errors = validate_car_payload({**car_payload, "id": car.id})

    assert errors == []
    assert again.id == car.id


def test_snake_case_field_names_are_accepted():
    """Test that the model can be populated by attribute names."""
    car = Car(
        brand="Skoda",
        model="Octavia",
        production_year=2018,
        fuel_type="Petrol",
        transmission="Manual",
        body_type="Hatchback",
        engine_power_kw=110,
        price=12000,
        mileage_km=120000,
        primary_image_path="octavia.jpg",
        location="Kaunas",
        contact_info="seller@example.com",
    )

    assert car.features == []
    assert car.additional_image_paths == []
    assert car.description is None


def test_production_year_below_range(car_payload):
    """Test that a production year before 1980 is rejected."""
    car_payload["productionYear"] = 1979

    car, errors = validate_car_payload(car_payload)

    assert car is None
    assert errors == ["Please enter a valid production year"]


def test_production_year_bounds_are_inclusive(car_payload):
    """Test that 1980 and 2026 are both accepted."""
    for year in (1980, 2026):
        car_payload["productionYear"] = year
        car, errors = validate_car_payload(car_payload)
        assert errors == []
        assert car.production_year == year


def test_missing_required_fields_are_reported_in_field_order(car_payload):
    """Test that every missing required field is listed once, in declaration order."""
    for key in ("contactInfo", "brand", "price", "fuelType"):
        del car_payload[key]

    _, errors = validate_car_payload(car_payload)

    assert errors == [
        "Brand is required",
        "Fuel type is required",
        "Price is required",
        "Contact information is required",
    ]


def test_blank_and_null_required_values_are_reported_as_required(car_payload):
    """Test that blank strings and nulls count as missing."""
    car_payload["model"] = "   "
    car_payload["location"] = ""
    car_payload["mileageKm"] = None

    _, errors = validate_car_payload(car_payload)

    assert errors == [
        "Model is required",
        "Mileage is required",
        "Location is required",
    ]


def test_range_and_length_violations(car_payload):
    """Test constraint messages for out-of-range and too-long values."""
    car_payload["brand"] = "B" * 51
    car_payload["enginePowerKW"] = 0
    car_payload["energyConsumptionKWhPer100Km"] = 150
    car_payload["price"] = 99.99
    car_payload["primaryImagePath"] = "p" * 501
    car_payload["description"] = "Too short"
    car_payload["vin"] = "ABC123"

    _, errors = validate_car_payload(car_payload)

    assert errors == [
        "Brand must not exceed 50 characters",
        "Power must be between 1 and 1500 kW",
        "Energy consumption must be between 0.1 and 100",
        "Price must be between €100 and €1,000,000",
        "Image path must not exceed 500 characters",
        "Description must be between 10 and 1000 characters",
        "VIN must be exactly 17 characters",
    ]


def test_unknown_enum_value(car_payload):
    """Test that enum values outside the closed set are rejected."""
    car_payload["fuelType"] = "Steam"

    _, errors = validate_car_payload(car_payload)

    assert errors == ["Fuel type must be one of: Petrol, Diesel, Electric, Hybrid, PlugInHybrid"]


def test_optional_fields_accept_null(car_payload):
    """Test that explicit nulls for optional fields are treated as absent."""
    car_payload["fuelConsumptionLitersPer100Km"] = None
    car_payload["description"] = None
    car_payload["vin"] = None
    car_payload["features"] = None

    car, errors = validate_car_payload(car_payload)

    assert errors == []
    assert car.fuel_consumption_liters_per_100km is None
    assert car.description is None
    assert car.vin is None
    assert car.features == []


def test_invalid_list_item_reported_once(car_payload):
    """Test that several bad entries in one list produce a single message."""
    car_payload["features"] = ["Sunroof", 1, 2]

    _, errors = validate_car_payload(car_payload)

    assert errors == ["Features must be a list of text entries"]


def test_non_object_payload():
    """Test that a JSON value other than an object is rejected."""
    car, errors = validate_car_payload(["not", "a", "car"])

    assert car is None
    assert errors == ["Car data must be a JSON object"]


def test_json_serialization_uses_camel_case_and_numeric_price(car_payload):
    """Test the wire format of a listing."""
    car, _ = validate_car_payload(car_payload)

    data = car.model_dump(mode="json", by_alias=True)

    assert data["productionYear"] == 2020
    assert data["enginePowerKW"] == 150
    assert data["energyConsumptionKWhPer100Km"] is None
    assert data["fuelType"] == "Diesel"
    assert data["price"] == 32500.5
    assert data["vin"] == "WAUZZZ4G0EN123456"
