"""Dependency injection providers for API endpoints.

This module contains dependency providers that create and inject the
collection and its service into API endpoints, decoupling the API layer
from concrete implementations.
"""

from functools import lru_cache

from bookshelf.codec.factories import BookFactory
from bookshelf.core.config import settings
from bookshelf.repositories.in_memory import ItemCollection
from bookshelf.services import BookCollectionService


@lru_cache
def get_collection() -> ItemCollection:
    """Get the collection instance.

    Using lru_cache ensures the same instance is reused across requests,
    so every request sees one shared collection guarded by its lock.

    Returns:
        The collection instance
    """
    return ItemCollection(BookFactory(), atomic_save=settings.atomic_save)


@lru_cache
def get_collection_service() -> BookCollectionService:
    """Get the collection service instance.

    Returns:
        The collection service instance
    """
    return BookCollectionService(get_collection())
