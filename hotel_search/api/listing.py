# hotel_search/api/listing.py
"""
Shared plumbing for the read-only listing endpoints: run one query, decode
each row into its response model, and wrap the result in a ListResponse.
"""

import logging
from typing import Iterable, List, Mapping, Type, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import Select

from hotel_search.models.envelope import ListResponse

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

GENERIC_DB_ERROR = "database query failed"


def decode_rows(rows: Iterable[Mapping], model: Type[M], kind: str) -> List[M]:
    """
    Validate every row into `model`.

    A row that does not validate is logged and skipped; the others are kept
    in query order.
    """
    items: List[M] = []
    for row in rows:
        try:
            items.append(model.model_validate(dict(row)))
        except ValidationError as e:
            logger.warning("Error decoding %s row %r: %s", kind, dict(row), e)
            continue
    return items


def run_listing(
    engine: Engine,
    stmt: Select,
    model: Type[M],
    kind: str,
    expose_errors: bool = True,
) -> JSONResponse:
    envelope_cls = ListResponse[model]

    try:
        with engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
    except SQLAlchemyError as e:
        logger.exception("Listing %s failed", kind)
        message = str(e) if expose_errors else GENERIC_DB_ERROR
        return JSONResponse(status_code=500, content=envelope_cls.fail(message).to_json())

    items = decode_rows(rows, model, kind)
    return JSONResponse(status_code=200, content=envelope_cls.ok(items).to_json())
