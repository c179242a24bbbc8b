"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    api_title: str = "Car Catalog"
    car_repository: str = "in_memory"  # in_memory or postgres
    database_url: str = ""  # Required when car_repository=postgres
    car_names_file: str = "Data/cars.json"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
