from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Remote places backend
    PLACES_API_BASE_URL: str = "http://localhost:8080/places/v1"
    PLACES_API_TIMEOUT: float = 10.0

    # Nearby search defaults
    NEARBY_PLACES_RANGE: int = 100  # meters
    NEARBY_PLACES_LIMIT: int = Field(default=10, gt=0)

    # Category substrings; set to null in the environment to disable filtering
    NEARBY_PLACES_FILTER: Optional[List[str]] = [
        "Restaurant",
        "Cafe",
        "Coffee",
        "Bar",
        "Bakery",
        "Museum",
        "Park",
        "Bookstore",
    ]

    # Used by the HTTP route when a request does not send its own threshold.
    # None means cached results are never reused.
    NEARBY_DISTANCE_THRESHOLD: Optional[float] = None

    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"
    LOG_FILE: str = "places.log"

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
