from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Catalog
    listings_path: str = "listings.json"
    vehicle_width: int = 10
    max_vehicles: int = 10

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
