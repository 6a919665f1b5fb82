"""API v1 routers."""

from .books import router as books_router
from .collection import router as collection_router
from .health import router as health_router

__all__ = [
    "books_router",
    "collection_router",
    "health_router",
]
