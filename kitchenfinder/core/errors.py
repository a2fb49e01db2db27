"""
Exception hierarchy for KitchenFinder
Every error carries the human readable message returned to callers
"""


class KitchenFinderError(Exception):
    """Base exception for KitchenFinder errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RequestValidationError(KitchenFinderError):
    """Inbound request failed validation"""
    pass


class FetchError(KitchenFinderError):
    """Outbound GET request failed or returned something other than JSON"""
    pass


class DirectoryError(KitchenFinderError):
    """Kitchen directory could not be fetched or normalized"""
    pass


class DirectionsError(KitchenFinderError):
    """Directions provider request failed"""
    pass
