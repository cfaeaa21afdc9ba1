# hotel_search/db/engine.py

import logging

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from hotel_search.config import Settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    # one pooled engine per process, created by the application factory
    return create_engine(settings.DATABASE_URL, future=True, pool_pre_ping=True)


def check_connection(engine: Engine) -> None:
    """
    Open one connection and run a trivial query.

    Raises the underlying SQLAlchemyError when the store is unreachable.
    """
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info("Successfully connected to database")


def get_engine(request: Request) -> Engine:
    """FastAPI dependency returning the engine owned by the running app."""
    return request.app.state.engine
