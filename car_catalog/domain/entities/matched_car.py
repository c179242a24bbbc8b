"""Matched car entity."""

from dataclasses import dataclass


@dataclass
class MatchedCar:
    """Car a user marked as liked. Unrelated to the catalog listing."""

    id: int
    make: str = ""
    model: str = ""
    year: int = 0
    image_url: str = ""
    description: str = ""
