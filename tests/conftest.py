"""Shared test fixtures."""

import pytest


@pytest.fixture
def car_payload():
    """Return a valid car listing payload as sent by API clients."""
    return {
        "brand": "Audi",
        "model": "A6",
        "productionYear": 2020,
        "fuelType": "Diesel",
        "transmission": "Automatic",
        "bodyType": "Estate",
        "enginePowerKW": 150,
        "fuelConsumptionLitersPer100Km": 5.8,
        "price": 32500.5,
        "mileageKm": 85000,
        "primaryImagePath": "images/audi-a6/front.jpg",
        "additionalImagePaths": ["images/audi-a6/interior.jpg", "images/audi-a6/rear.jpg"],
        "description": "Well maintained, full service history.",
        "features": ["Heated seats", "Adaptive cruise control"],
        "location": "Vilnius",
        "contactInfo": "+37060000000",
        "vin": "WAUZZZ4G0EN123456",
    }
