"""
Kitchen directory client
"""

import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from kitchenfinder.config.settings import DEFAULT_DIRECTORY_URL
from kitchenfinder.core.errors import DirectoryError, FetchError
from kitchenfinder.core.models import Kitchen
from kitchenfinder.http.fetcher import JsonFetcher

DIRECTORY_FAILED_MESSAGE = "Could not complete Cluster Truck kitchen request"


def compose_address(record: Dict[str, Any]) -> str:
    """Join address_1 with address_2 when a second line is present"""
    address = f"{record['address_1']}"
    if record.get("address_2"):
        address += f" {record['address_2']}"
    return address


def normalize_kitchen(record: Dict[str, Any]) -> Kitchen:
    """
    Map a raw directory record to a Kitchen

    Args:
        record: Directory record with id, name, address_1, address_2,
            city, state, zip_code and location

    Returns:
        Normalized Kitchen
    """
    return Kitchen(
        id=record["id"],
        name=record["name"],
        address=compose_address(record),
        city=record["city"],
        state=record["state"],
        zip=record["zip_code"],
        location=record["location"],
    )


class KitchenDirectoryClient:
    """Fetches the list of kitchens from the directory endpoint"""

    def __init__(self, fetcher: JsonFetcher, directory_url: str = DEFAULT_DIRECTORY_URL):
        self.fetcher = fetcher
        self.directory_url = directory_url
        self.logger = logging.getLogger(__name__)

    async def get_kitchens(self) -> List[Kitchen]:
        """
        Fetch and normalize every kitchen in the directory

        Returns:
            Kitchens in directory order

        Raises:
            DirectoryError: If the directory could not be fetched or parsed
        """
        try:
            records = await self.fetcher.fetch(self.directory_url)
            kitchens = [normalize_kitchen(record) for record in records]
        except FetchError as e:
            self.logger.error(f"Kitchen directory request failed: {e}")
            raise DirectoryError(DIRECTORY_FAILED_MESSAGE) from e
        except (KeyError, TypeError, ValidationError) as e:
            self.logger.error(f"Error parsing kitchen directory response: {e}")
            raise DirectoryError(DIRECTORY_FAILED_MESSAGE) from e

        self.logger.info(f"Fetched {len(kitchens)} kitchens from directory")
        return kitchens
