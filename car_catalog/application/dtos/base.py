"""Base class for catalog DTOs exchanged between the HTTP layer and repositories."""

from pydantic import BaseModel, ConfigDict


class DTO(BaseModel):
    """Base class for application DTOs. Changed copies are made with ``model_copy``."""

    model_config = ConfigDict(frozen=True)
