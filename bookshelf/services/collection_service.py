"""Collection service for orchestrating book collection use cases.

This module contains the BookCollectionService class shared by the command
interpreter and the HTTP API, plus the helpers that turn raw user-supplied
strings into validated values.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from bookshelf.domain import ArgumentParseError, Book, Record

if TYPE_CHECKING:
    from bookshelf.repositories.ports import RecordCollection

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"-?[0-9]+")


def parse_index(value: str) -> int:
    """Parse a slot index given on the command line.

    Raises:
        ArgumentParseError: If the value is not a non-negative integer
    """
    if not INTEGER_PATTERN.fullmatch(value):
        raise ArgumentParseError("index", value, "not an integer")
    index = int(value)
    if index < 0:
        raise ArgumentParseError("index", value, "cannot be negative")
    return index


def parse_date(value: str) -> int:
    """Parse a publication year given on the command line.

    Range checks are left to the Book invariant.

    Raises:
        ArgumentParseError: If the value is not an integer
    """
    if not INTEGER_PATTERN.fullmatch(value):
        raise ArgumentParseError("date", value, "not an integer")
    return int(value)


def parse_book_fields(
    title: str, author: str, publisher: str, date: str, genre: str
) -> Book:
    """Build a Book from raw string arguments.

    Raises:
        ArgumentParseError: If the date is not an integer
        ValidationError: If any field violates the Book invariant
    """
    return Book(
        title=title,
        author=author,
        publisher=publisher,
        date=parse_date(date),
        genre=genre,
    )


class BookCollectionService:
    """Service class for book collection operations.

    Attributes:
        _collection: The record collection holding the books
    """

    def __init__(self, collection: RecordCollection) -> None:
        self._collection = collection

    def add_book(self, book: Book) -> int:
        """Append a book and return its index."""
        index = self._collection.add_item(book)
        logger.info(f"Added book at index {index}: {book.title!r}")
        return index

    def update_book(self, index: int, book: Book) -> Book:
        """Replace the book at ``index``; a removed slot becomes live again.

        Raises:
            ItemIndexError: If the index is out of range
        """
        self._collection.update_item(index, book)
        logger.info(f"Updated book at index {index}: {book.title!r}")
        return book

    def remove_book(self, index: int) -> None:
        """Mark the book at ``index`` as removed.

        Raises:
            ItemIndexError: If the index is out of range
        """
        self._collection.remove_item(index)
        logger.info(f"Removed book at index {index}")

    def get_book(self, index: int) -> Record:
        """Retrieve the record at ``index`` regardless of removed state.

        Raises:
            ItemIndexError: If the index is out of range
        """
        return self._collection.get_item(index)

    def is_removed(self, index: int) -> bool:
        return self._collection.is_removed(index)

    def list_books(self) -> list[tuple[int, Record]]:
        """Retrieve (index, record) pairs for every live slot in index order."""
        return self._collection.list_live()

    def count(self) -> int:
        """Get the number of live books."""
        return len(self._collection.list_live())

    def size(self) -> int:
        """Get the slot count including removed tombstones."""
        return self._collection.get_size()

    def clean(self) -> int:
        """Purge removed slots and renumber the survivors."""
        dropped = self._collection.clean()
        logger.info(f"Cleaned collection, dropped {dropped} removed slots")
        return dropped

    def load(self, path: str | Path) -> int:
        """Replace the collection with the contents of ``path``.

        Raises:
            CollectionLoadError: If the file cannot be opened or parsed
        """
        loaded = self._collection.load_collection(path)
        logger.info(f"Loaded {loaded} books from {path}")
        return loaded

    def save(self, path: str | Path) -> int:
        """Persist live books to ``path``.

        Raises:
            CollectionSaveError: If the file cannot be written
        """
        saved = self._collection.save_collection(path)
        logger.info(f"Saved {saved} books to {path}")
        return saved
