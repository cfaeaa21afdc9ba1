# hotel_search/client/search.py
"""
In-memory search over a listing snapshot.

Each table offers a fixed set of searchable fields; every field maps to an
accessor that pulls the value out of a record. Matching is a
case-insensitive substring test on the value's text form.
"""

from operator import attrgetter
from typing import Any, Callable, Dict, List, Literal, NamedTuple, Sequence

from pydantic import BaseModel, model_validator

CITIES = "cities"
HOTELS = "hotels"

Table = Literal["hotels", "cities"]


class FieldOption(NamedTuple):
    value: str
    label: str
    accessor: Callable[[Any], Any]


FIELD_OPTIONS: Dict[str, List[FieldOption]] = {
    CITIES: [
        FieldOption("id", "ID", attrgetter("id")),
        FieldOption("name", "Name", attrgetter("name")),
    ],
    HOTELS: [
        FieldOption("id", "ID", attrgetter("id")),
        FieldOption("name", "Name", attrgetter("name")),
        FieldOption("city", "City", attrgetter("city_name")),
        FieldOption("capacity", "Capacity", attrgetter("capacity")),
        FieldOption("price", "Price", attrgetter("price")),
    ],
}

DEFAULT_FIELD = "name"


def get_field(table: str, field: str) -> FieldOption:
    if table not in FIELD_OPTIONS:
        raise ValueError(f"unknown table {table!r}")
    for option in FIELD_OPTIONS[table]:
        if option.value == field:
            return option
    raise ValueError(f"field {field!r} is not searchable on {table}")


class SearchParams(BaseModel):
    table: Table = HOTELS
    field: str = DEFAULT_FIELD
    query: str = ""

    @model_validator(mode="after")
    def _field_belongs_to_table(self) -> "SearchParams":
        get_field(self.table, self.field)
        return self


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def filter_records(snapshot: Sequence[Any], params: SearchParams) -> List[Any]:
    """
    Return the records of `snapshot` whose selected field contains the query.

    A blank query returns the whole snapshot. Order is always the snapshot's.
    """
    if not params.query.strip():
        return list(snapshot)

    accessor = get_field(params.table, params.field).accessor
    needle = params.query.lower()
    return [
        record for record in snapshot
        if needle in _as_text(accessor(record)).lower()
    ]
