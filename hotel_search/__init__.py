# hotel_search/__init__.py
"""
Hotel search: read-only city/hotel listing API plus an in-memory search client.

The service can be run with:
    uvicorn hotel_search:create_app --factory --port 8080
or through the CLI:
    hotel-search serve
"""

from .main import create_app

__all__ = ["create_app"]
