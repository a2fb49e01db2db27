"""
Core data models and errors for KitchenFinder
"""

from .errors import (
    DirectionsError,
    DirectoryError,
    FetchError,
    KitchenFinderError,
    RequestValidationError,
)
from .models import (
    AddressResolutionFailure,
    ClosestKitchenRequest,
    EnrichedKitchen,
    Kitchen,
    Location,
    Metric,
    TravelInfo,
    TravelValue,
)

__all__ = [
    # Models
    "Kitchen",
    "Location",
    "EnrichedKitchen",
    "TravelInfo",
    "TravelValue",
    "AddressResolutionFailure",
    "ClosestKitchenRequest",
    "Metric",
    # Errors
    "KitchenFinderError",
    "FetchError",
    "DirectoryError",
    "DirectionsError",
    "RequestValidationError",
]
