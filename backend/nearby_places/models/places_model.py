from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Union

VENUE_PLACE_TYPE = "VENUE"

# --- Domain Models ---
class Coordinate(BaseModel):
    """Latitude / longitude in degrees. Frozen so it can key the cache."""
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    def is_origin(self) -> bool:
        return self.latitude == 0 and self.longitude == 0

class Address(BaseModel):
    street_address: str = ""
    locality: str = ""
    region: str = ""
    postal_code: str = ""
    country: str = ""
    country_code: str = ""

class Time(BaseModel):
    hour: int = 0
    minute: int = 0

class TimeInterval(BaseModel):
    start_hour: Time = Field(default_factory=Time)
    end_hour: Time = Field(default_factory=Time)

class DayHours(BaseModel):
    day: str
    hours: List[TimeInterval] = []

class OpeningHours(BaseModel):
    day_hours: List[DayHours] = []
    time_zone: str = ""

class PlaceInfo(BaseModel):
    place_id: str
    category: str
    name: str
    phone_number: str = ""
    address: Address
    opening_hours: OpeningHours = Field(default_factory=OpeningHours)
    centroid: Coordinate

# --- Backend Records ---
class RawPlace(BaseModel):
    """Entry of the backend's nearbyPlaces list. Unknown fields are ignored."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    place_id: str = Field(alias="placeId")
    category_name: str = Field(default="", alias="categoryName")
    place_type: Optional[str] = Field(default=None, alias="placeTypeEnum")

    @field_validator("category_name", mode="before")
    @classmethod
    def null_category_as_empty(cls, v):
        return v or ""

    def is_venue(self) -> bool:
        return self.place_type == VENUE_PLACE_TYPE

# --- Category Filter ---
class NoFilter(BaseModel):
    """Every backend result passes."""
    model_config = ConfigDict(frozen=True)

class CategoryList(BaseModel):
    """Keep places whose category name contains one of these substrings."""
    model_config = ConfigDict(frozen=True)

    categories: List[str]

    def matches(self, category_name: str) -> bool:
        for category in self.categories:
            if category in category_name:
                return True
        return False

CategoryFilter = Union[NoFilter, CategoryList]

NO_FILTER = NoFilter()

# --- API Request/Response Models ---
class PlacesRequest(BaseModel):
    lat: float
    lon: float
    limit: Optional[int] = Field(default=None, gt=0)
    distance_threshold: Optional[float] = Field(default=None, ge=0)
    categories: Optional[List[str]] = None
    unfiltered: bool = False

class PlacesResponse(BaseModel):
    places: List[PlaceInfo]
    count: int
