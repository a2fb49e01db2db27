"""
KitchenFinder: Closest Kitchen Lookup Service

A serverless handler that ranks kitchens from a kitchen directory by
travel distance or duration from a customer address.
"""

__version__ = "0.1.0"
__author__ = "KitchenFinder Team"

from .core.models import EnrichedKitchen, Kitchen, Metric, TravelInfo
from .handler.lambda_function import handler

__all__ = [
    "Kitchen",
    "EnrichedKitchen",
    "TravelInfo",
    "Metric",
    "handler",
]
