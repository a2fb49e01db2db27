"""
Directions API integration for kitchen travel ranking
"""

from .directions import DirectionsClient
from .selector import get_closest

__all__ = ["DirectionsClient", "get_closest"]
