"""Shared test fixtures and configuration."""

import contextlib
import logging

import pytest
from fastapi.testclient import TestClient

from bookshelf.api.v1.deps import get_collection
from bookshelf.codec.factories import BookFactory
from bookshelf.core.config import settings
from bookshelf.domain import Book
from bookshelf.main import app
from bookshelf.repositories.in_memory import ItemCollection
from bookshelf.services import BookCollectionService


@pytest.fixture
def client(tmp_path, monkeypatch) -> TestClient:
    """Create a test client backed by an empty collection and a temp data dir."""
    monkeypatch.setattr(settings, "data_dir", tmp_path)
    get_collection().clear()
    return TestClient(app)


@pytest.fixture
def collection() -> ItemCollection:
    """Create a fresh collection for each test."""
    return ItemCollection(BookFactory())


@pytest.fixture
def service(collection: ItemCollection) -> BookCollectionService:
    """Create a service over the fresh collection."""
    return BookCollectionService(collection)


@pytest.fixture
def sample_book() -> Book:
    """Create a sample book for testing."""
    return Book(
        title="Dune",
        author="Herbert",
        publisher="Chilton",
        date=1965,
        genre="SF",
    )


def make_books(count: int) -> list[Book]:
    """Build ``count`` distinct valid books."""
    return [
        Book(
            title=f"Title{i}",
            author=f"Author{i}",
            publisher=f"Publisher{i}",
            date=1900 + i,
            genre=f"Genre{i}",
        )
        for i in range(count)
    ]


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration between tests to avoid interference."""
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level

    yield

    logging.root.handlers = original_handlers
    logging.root.level = original_level


@contextlib.contextmanager
def capture_logger(
    caplog: pytest.LogCaptureFixture, logger_name: str, level: int = logging.INFO
):
    logger = logging.getLogger(logger_name)
    with caplog.at_level(level, logger=logger_name):
        logger.addHandler(caplog.handler)
        try:
            yield
        finally:
            logger.removeHandler(caplog.handler)
