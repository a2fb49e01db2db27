"""
Directions API client for kitchen travel info
"""

import logging
from typing import Dict, Union

from pydantic import ValidationError

from kitchenfinder.config.settings import DEFAULT_DIRECTIONS_URL
from kitchenfinder.core.errors import DirectionsError, FetchError
from kitchenfinder.core.models import AddressResolutionFailure, Kitchen, TravelInfo
from kitchenfinder.http.fetcher import JsonFetcher

DIRECTIONS_FAILED_MESSAGE = "Could not complete Google API request"


class DirectionsClient:
    """
    Async client for the Google Directions API
    Resolves distance and duration from a source address to a kitchen
    """

    def __init__(
        self,
        fetcher: JsonFetcher,
        api_key: str,
        directions_url: str = DEFAULT_DIRECTIONS_URL
    ):
        if not api_key:
            raise ValueError("Directions API key required")

        self.fetcher = fetcher
        self.api_key = api_key
        self.directions_url = directions_url
        self.logger = logging.getLogger(__name__)

    def build_params(self, source_address: str, kitchen: Kitchen) -> Dict[str, str]:
        """Query parameters for a source address to kitchen route"""
        return {
            "origin": source_address,
            "destination": kitchen.location.as_waypoint(),
            "key": self.api_key,
        }

    async def get_travel_info(
        self,
        source_address: str,
        kitchen: Kitchen
    ) -> Union[TravelInfo, AddressResolutionFailure]:
        """
        Get travel info from a source address to a kitchen

        Args:
            source_address: Address the customer travels from
            kitchen: Kitchen to route to

        Returns:
            TravelInfo for the first route leg, or AddressResolutionFailure
            if the provider found no route

        Raises:
            DirectionsError: If the request failed or the response was malformed
        """
        try:
            directions = await self.fetcher.fetch(
                self.directions_url,
                params=self.build_params(source_address, kitchen)
            )
        except FetchError as e:
            self.logger.error(f"Directions request failed for kitchen {kitchen.id}: {e}")
            raise DirectionsError(DIRECTIONS_FAILED_MESSAGE) from e

        routes = directions.get("routes") if isinstance(directions, dict) else None
        if not isinstance(routes, list) or not routes or not routes[0]:
            status = directions.get("status") if isinstance(directions, dict) else None
            self.logger.warning(
                f"No route from '{source_address}' to kitchen {kitchen.id} (status: {status})"
            )
            return AddressResolutionFailure()

        try:
            leg = routes[0]["legs"][0]
            return TravelInfo(distance=leg["distance"], duration=leg["duration"])
        except (KeyError, IndexError, TypeError, ValidationError) as e:
            self.logger.error(f"Error parsing directions response for kitchen {kitchen.id}: {e}")
            raise DirectionsError(DIRECTIONS_FAILED_MESSAGE) from e
