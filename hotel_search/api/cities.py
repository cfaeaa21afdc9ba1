# hotel_search/api/cities.py

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.engine import Engine

from hotel_search.api.listing import run_listing
from hotel_search.config import Settings, get_settings
from hotel_search.db.engine import get_engine
from hotel_search.db.schema import cities
from hotel_search.models.cities import CityOut
from hotel_search.models.envelope import ListResponse

router = APIRouter(prefix="/cities", tags=["cities"])


@router.get("", response_model=ListResponse[CityOut])
def list_cities(
    engine: Engine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
):
    """
    Return all cities ordered by name (ordering follows the store's collation).
    """
    stmt = (
        select(
            cities.c.id,
            cities.c.name,
        )
        .order_by(cities.c.name)
    )

    return run_listing(engine, stmt, CityOut, "city", settings.EXPOSE_DB_ERRORS)
