# hotel_search/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from hotel_search.api.cities import router as cities_router
from hotel_search.api.hotels import router as hotels_router
from hotel_search.config import Settings, get_settings
from hotel_search.db.engine import build_engine, check_connection

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    engine: Optional[Engine] = None,
) -> FastAPI:
    """
    Build the listing service.

    The app owns the connection pool: pass `engine` to inject one (it is then
    left open on shutdown), otherwise one is built from `DATABASE_URL` at
    startup and disposed on shutdown.
    """
    if settings is None:
        settings = get_settings()
    owns_engine = engine is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.engine is None:
            app.state.engine = build_engine(settings)
        try:
            check_connection(app.state.engine)
        except SQLAlchemyError:
            logger.exception("Failed to connect to database")
            raise
        yield
        if owns_engine:
            app.state.engine.dispose()
            app.state.engine = None

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept"],
    )

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    api = APIRouter(prefix="/api")
    api.include_router(cities_router)
    api.include_router(hotels_router)
    app.include_router(api)

    return app
