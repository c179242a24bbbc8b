"""SQLAlchemy ORM models for car listings."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Float, Integer, Numeric, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class CarModel(Base):
    """SQLAlchemy model for cars table."""

    __tablename__ = "cars"

    id = Column(String(36), primary_key=True, index=True)
    brand = Column(String(50), nullable=False)
    model = Column(String(50), nullable=False)
    production_year = Column(Integer, nullable=False)
    fuel_type = Column(String(20), nullable=False)
    transmission = Column(String(20), nullable=False)
    body_type = Column(String(20), nullable=False)
    engine_power_kw = Column(Integer, nullable=False)
    fuel_consumption_liters_per_100km = Column(Float, nullable=True)
    energy_consumption_kwh_per_100km = Column(Float, nullable=True)
    price = Column(Numeric(12, 2), nullable=False)
    mileage_km = Column(Integer, nullable=False)
    primary_image_path = Column(String(500), nullable=False)
    additional_image_paths = Column(JSON, nullable=False, default=list)
    description = Column(Text, nullable=True)
    features = Column(JSON, nullable=False, default=list)
    location = Column(String(100), nullable=False)
    contact_info = Column(String(100), nullable=False)
    vin = Column(String(17), nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
