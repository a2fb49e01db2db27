"""
Core data models for KitchenFinder kitchen lookup and travel ranking
"""

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

ADDRESS_NOT_FOUND_MESSAGE = "Could not locate provided address"


class Metric(str, Enum):
    """Travel metrics kitchens can be ranked by"""

    DISTANCE = "distance"
    DURATION = "duration"


class Location(BaseModel):
    """Geographic location with coordinates"""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(description="Latitude")
    lng: float = Field(description="Longitude")

    def as_waypoint(self) -> str:
        """Format as a 'lat,lng' waypoint for the directions provider"""
        return f"{self.lat},{self.lng}"


class Kitchen(BaseModel):
    """
    Kitchen location normalized from a directory record
    Immutable once created; travel info is merged into an EnrichedKitchen
    """

    model_config = ConfigDict(frozen=True)

    id: Union[int, str] = Field(description="Kitchen identifier from the directory")
    name: str = Field(description="Kitchen display name")
    address: str = Field(description="Street address composed from both address lines")
    city: str = Field(description="City")
    state: str = Field(description="State")
    zip: str = Field(description="Postal code")
    location: Location = Field(description="Kitchen coordinates")

    @field_validator("zip", mode="before")
    @classmethod
    def coerce_zip(cls, v):
        """Directory zip codes sometimes arrive as numbers"""
        if isinstance(v, int):
            return str(v)
        return v


class TravelValue(BaseModel):
    """A single leg measurement as reported by the directions provider"""

    value: Union[int, float] = Field(description="Raw value (meters or seconds)")
    text: str = Field(description="Human readable value")


class TravelInfo(BaseModel):
    """Distance and duration of the first route leg"""

    distance: TravelValue = Field(description="Leg distance")
    duration: TravelValue = Field(description="Leg duration")


class AddressResolutionFailure(BaseModel):
    """Returned instead of TravelInfo when no route could be found"""

    message: str = Field(ADDRESS_NOT_FOUND_MESSAGE, description="Failure reason")


class EnrichedKitchen(Kitchen):
    """Kitchen merged with the travel info computed for it"""

    distance: TravelValue = Field(description="Travel distance to the kitchen")
    duration: TravelValue = Field(description="Travel duration to the kitchen")

    @classmethod
    def from_travel_info(cls, kitchen: Kitchen, travel_info: TravelInfo) -> "EnrichedKitchen":
        """Merge a kitchen with its travel info"""
        return cls(**kitchen.model_dump(), **travel_info.model_dump())

    def metric_value(self, metric: Metric) -> float:
        """Ranking value for the given metric"""
        return getattr(self, metric.value).value


class ClosestKitchenRequest(BaseModel):
    """Validated closest-kitchen request body"""

    address: str = Field(..., description="Source address to travel from", min_length=1)
    metric: Metric = Field(Metric.DURATION, description="Metric to rank kitchens by")
