# hotel_search/db/schema.py
"""
Table definitions used to build the listing queries.

The tables are owned and migrated outside this service; nothing here is
ever used to emit DDL against the production database.
"""

from sqlalchemy import (
    MetaData, Table, Column, Integer, String,
    Numeric, ForeignKey,
)

metadata = MetaData()

cities = Table(
    "cities",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String, nullable=False),
)

hotels = Table(
    "hotels",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String, nullable=False),
    # may be NULL or point at a city that no longer exists
    Column("city", Integer, ForeignKey("cities.id"), nullable=True),
    Column("capacity", Integer, nullable=False),
    Column("price", Numeric(10, 2), nullable=False),
)
