"""HTTP adapter schemas."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ErrorResponse(BaseModel):
    """Error body returned by the API."""

    error: str
    details: Optional[Union[str, list[str]]] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Validation failed",
                "details": ["Brand is required", "Please enter a valid production year"],
            }
        }
    )


class MatchedCarPayload(BaseModel):
    """Liked car payload."""

    id: int
    make: str = ""
    model: str = ""
    year: int = 0
    image_url: str = ""
    description: str = ""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 7,
                "make": "Volvo",
                "model": "V60",
                "year": 2019,
                "imageUrl": "https://example.com/volvo-v60.jpg",
                "description": "Family estate",
            }
        },
    )
