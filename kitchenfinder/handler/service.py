"""
Closest kitchen request handler
Validates requests, ranks kitchens by travel metric and shapes responses
"""

import asyncio
import base64
import json
import logging
from typing import Any, Dict, List, Optional, Union

from kitchenfinder.config.settings import Settings
from kitchenfinder.core.errors import KitchenFinderError, RequestValidationError
from kitchenfinder.core.models import (
    AddressResolutionFailure,
    ClosestKitchenRequest,
    EnrichedKitchen,
    Metric,
)
from kitchenfinder.directory.client import KitchenDirectoryClient
from kitchenfinder.http.fetcher import JsonFetcher
from kitchenfinder.traveltime.directions import DirectionsClient
from kitchenfinder.traveltime.selector import get_closest

from .responses import Payload, build_response

INVALID_METHOD_MESSAGE = "Invalid request method"
INVALID_BODY_MESSAGE = "Invalid request body"
MISSING_ADDRESS_MESSAGE = "Missing address"
INVALID_ADDRESS_MESSAGE = "Address must be a string"
INVALID_METRIC_MESSAGE = "Metric should be 'distance' or 'duration' (default)"
NO_KITCHENS_MESSAGE = "No kitchens available"


def _request_method(event: Dict[str, Any]) -> Optional[str]:
    """HTTP method from a REST (v1) or HTTP API (v2) proxy event"""
    method = event.get("httpMethod")
    if method is None:
        context = event.get("requestContext")
        http = context.get("http") if isinstance(context, dict) else None
        method = http.get("method") if isinstance(http, dict) else None
    return method


def _decode_body(event: Dict[str, Any]) -> Any:
    """Decode the JSON request body, undoing base64 encoding if flagged"""
    raw = event.get("body")
    if raw is None:
        # A bodyless request decodes like a JSON null
        return None
    try:
        if event.get("isBase64Encoded"):
            raw = base64.b64decode(raw).decode("utf-8")
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        raise RequestValidationError(INVALID_BODY_MESSAGE) from e


class ClosestKitchenHandler:
    """
    Orchestrates a closest kitchen lookup for one inbound request
    Kitchens are resolved concurrently; one failed address invalidates the request
    """

    def __init__(self, directory: KitchenDirectoryClient, directions: DirectionsClient):
        self.directory = directory
        self.directions = directions
        self.logger = logging.getLogger(__name__)

    def parse_request(self, event: Any) -> ClosestKitchenRequest:
        """
        Validate an inbound proxy event

        Args:
            event: Lambda proxy event

        Returns:
            Validated request

        Raises:
            RequestValidationError: With the message returned to the caller
        """
        if not isinstance(event, dict) or _request_method(event) != "POST":
            raise RequestValidationError(INVALID_METHOD_MESSAGE)

        body = _decode_body(event)

        if not isinstance(body, dict) or not body.get("address"):
            raise RequestValidationError(MISSING_ADDRESS_MESSAGE)
        if not isinstance(body["address"], str):
            raise RequestValidationError(INVALID_ADDRESS_MESSAGE)

        metric = body.get("metric")
        if metric and metric not in [m.value for m in Metric]:
            raise RequestValidationError(INVALID_METRIC_MESSAGE)

        return ClosestKitchenRequest(
            address=body["address"],
            metric=metric or Metric.DURATION,
        )

    async def find_closest(
        self,
        request: ClosestKitchenRequest
    ) -> Union[EnrichedKitchen, AddressResolutionFailure]:
        """
        Rank every directory kitchen by travel metric from the request address

        Args:
            request: Validated request

        Returns:
            Closest kitchen, or the first AddressResolutionFailure in
            directory order

        Raises:
            KitchenFinderError: If the directory or directions requests fail
        """
        kitchens = await self.directory.get_kitchens()
        if not kitchens:
            raise KitchenFinderError(NO_KITCHENS_MESSAGE)

        self.logger.info(
            f"Resolving travel info for {len(kitchens)} kitchens from '{request.address}'"
        )

        # Wait for every lookup to settle; nothing is cancelled early
        tasks = [self.directions.get_travel_info(request.address, kitchen) for kitchen in kitchens]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        for result in results:
            if isinstance(result, BaseException):
                raise result

        enriched: List[EnrichedKitchen] = []
        for kitchen, result in zip(kitchens, results):
            if isinstance(result, AddressResolutionFailure):
                return result
            enriched.append(EnrichedKitchen.from_travel_info(kitchen, result))

        closest = get_closest(enriched, request.metric)
        self.logger.info(
            f"Closest kitchen by {request.metric.value}: {closest.name} ({closest.id})"
        )
        return closest

    async def handle(self, event: Any) -> Dict[str, Any]:
        """
        Handle a proxy event and always return a response envelope

        Args:
            event: Lambda proxy event

        Returns:
            Dict with statusCode, headers and body
        """
        try:
            request = self.parse_request(event)
        except RequestValidationError as e:
            self.logger.info(f"Rejected request: {e.message}")
            return build_response(400, e.message)

        try:
            result = await self.find_closest(request)
        except KitchenFinderError as e:
            self.logger.error(f"Closest kitchen lookup failed: {e.message}")
            return build_response(500, e.message)
        except Exception as e:
            self.logger.exception(f"Unexpected error during closest kitchen lookup: {e}")
            return build_response(500, str(e) or e.__class__.__name__)

        if isinstance(result, AddressResolutionFailure):
            return build_response(400, result.message)

        return build_response(200, Payload(data=result))


async def handle_event(event: Any, settings: Settings) -> Dict[str, Any]:
    """
    Handle one proxy event with clients built from settings

    Args:
        event: Lambda proxy event
        settings: Endpoints, API key and timeout

    Returns:
        Response envelope
    """
    async with JsonFetcher(timeout=settings.timeout) as fetcher:
        handler = ClosestKitchenHandler(
            directory=KitchenDirectoryClient(fetcher, settings.directory_url),
            directions=DirectionsClient(
                fetcher,
                api_key=settings.google_directions_api_key,
                directions_url=settings.directions_url,
            ),
        )
        return await handler.handle(event)
