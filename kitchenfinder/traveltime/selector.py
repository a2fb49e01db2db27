"""
Closest kitchen selection
"""

from typing import Sequence

from kitchenfinder.core.models import EnrichedKitchen, Metric


def get_closest(kitchens: Sequence[EnrichedKitchen], metric: Metric) -> EnrichedKitchen:
    """
    Pick the kitchen with the smallest value for a metric

    Ties keep the kitchen seen first.

    Args:
        kitchens: Kitchens with travel info, in directory order
        metric: Metric to rank by

    Returns:
        Closest kitchen

    Raises:
        ValueError: If no kitchens are given
    """
    if not kitchens:
        raise ValueError("Cannot select closest kitchen from an empty list")

    metric = Metric(metric)
    closest = kitchens[0]
    for kitchen in kitchens[1:]:
        if kitchen.metric_value(metric) < closest.metric_value(metric):
            closest = kitchen
    return closest
