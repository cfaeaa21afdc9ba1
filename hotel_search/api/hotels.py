# hotel_search/api/hotels.py

from fastapi import APIRouter, Depends
from sqlalchemy import String, func, select, type_coerce
from sqlalchemy.engine import Engine

from hotel_search.api.listing import run_listing
from hotel_search.config import Settings, get_settings
from hotel_search.db.engine import get_engine
from hotel_search.db.schema import cities, hotels
from hotel_search.models.envelope import ListResponse
from hotel_search.models.hotels import HotelOut

router = APIRouter(prefix="/hotels", tags=["hotels"])


@router.get("", response_model=ListResponse[HotelOut])
def list_hotels(
    engine: Engine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
):
    """
    Return all hotels with their resolved city name, ordered by hotel name.

    Hotels whose city reference is NULL or dangling get an empty city_name.
    """
    stmt = (
        select(
            hotels.c.id,
            hotels.c.name,
            hotels.c.city.label("city_id"),
            func.coalesce(cities.c.name, "").label("city_name"),
            hotels.c.capacity,
            # raw driver value; HotelOut turns it into a Decimal row by row
            type_coerce(hotels.c.price, String).label("price"),
        )
        .select_from(hotels.outerjoin(cities, hotels.c.city == cities.c.id))
        .order_by(hotels.c.name)
    )

    return run_listing(engine, stmt, HotelOut, "hotel", settings.EXPOSE_DB_ERRORS)
