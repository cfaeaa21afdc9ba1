# hotel_search/client/browser.py

import logging
from typing import Any, List

from hotel_search.client.api import ListingClient, LoadError
from hotel_search.client.search import (
    CITIES,
    DEFAULT_FIELD,
    FIELD_OPTIONS,
    FieldOption,
    SearchParams,
    filter_records,
)
from hotel_search.models.cities import CityOut
from hotel_search.models.hotels import HotelOut

logger = logging.getLogger(__name__)


class SearchBrowser:
    """
    Client-side search state.

    Both listings are loaded once by `load()`; every search afterwards runs
    against those snapshots and never goes back to the server.
    """

    def __init__(self, client: ListingClient):
        self.client = client
        self.cities: List[CityOut] = []
        self.hotels: List[HotelOut] = []
        self.params = SearchParams()
        self.error = ""
        self.loading = False

    async def load(self) -> bool:
        """
        Fetch both snapshots. Returns False (with `error` set) if either
        listing failed, in which case both snapshots are left empty.
        """
        self.loading = True
        self.error = ""
        try:
            cities, hotels = await self.client.fetch_all()
        except LoadError as e:
            self.cities, self.hotels = [], []
            self.error = str(e)
            return False
        finally:
            self.loading = False

        self.cities, self.hotels = cities, hotels
        logger.info("Loaded %d cities and %d hotels", len(cities), len(hotels))
        return True

    @property
    def snapshot(self) -> List[Any]:
        return self.cities if self.params.table == CITIES else self.hotels

    @property
    def filtered(self) -> List[Any]:
        return filter_records(self.snapshot, self.params)

    @property
    def field_options(self) -> List[FieldOption]:
        return FIELD_OPTIONS[self.params.table]

    @property
    def summary(self) -> str:
        return f"Search through {len(self.hotels)} hotels in {len(self.cities)} cities"

    def set_table(self, table: str) -> None:
        # switching tables starts a fresh search on the new snapshot
        self.params = SearchParams(table=table, field=DEFAULT_FIELD, query="")

    def set_field(self, field: str) -> None:
        self.params = SearchParams(table=self.params.table, field=field, query=self.params.query)

    def set_query(self, query: str) -> None:
        self.params = self.params.model_copy(update={"query": query})

    def clear(self) -> None:
        self.set_query("")
