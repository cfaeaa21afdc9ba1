# hotel_search/client/api.py
"""
HTTP client for the listing endpoints.
"""

import asyncio
import logging
from typing import List, Optional, Tuple

import httpx

from hotel_search.models.cities import CityOut
from hotel_search.models.envelope import ListResponse
from hotel_search.models.hotels import HotelOut

logger = logging.getLogger(__name__)

LOAD_FAILED = "Failed to load data"


class LoadError(Exception):
    """Listings could not be loaded; the message is meant for the user."""


class ListingClient:
    """Fetches both listings from the service in one round."""

    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.transport = transport

    async def fetch_all(self) -> Tuple[List[CityOut], List[HotelOut]]:
        """
        Request /cities and /hotels concurrently and wait for both.

        Raises LoadError when either request fails, returns something that is
        not a valid envelope, or returns an envelope with success=false.
        """
        async with httpx.AsyncClient(base_url=self.base_url, transport=self.transport) as client:
            results = await asyncio.gather(
                client.get("/cities"),
                client.get("/hotels"),
                return_exceptions=True,
            )

        try:
            for res in results:
                if isinstance(res, BaseException):
                    raise res
            cities_res, hotels_res = results
            cities_env = ListResponse[CityOut].model_validate(cities_res.json())
            hotels_env = ListResponse[HotelOut].model_validate(hotels_res.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Error connecting to %s: %s", self.base_url, e)
            raise LoadError(f"Error connecting to server: {e}") from e

        if not (cities_env.success and hotels_env.success):
            logger.warning(
                "Listing failed: cities=%r hotels=%r",
                cities_env.error,
                hotels_env.error,
            )
            raise LoadError(LOAD_FAILED)

        return cities_env.data, hotels_env.data
