"""Domain entities for the book collection.

This module contains the record abstraction stored by the collection manager
and its one concrete kind, Book. Records are immutable once constructed and
know how to serialise themselves; reading them back is the job of a record
factory (see ``bookshelf.codec.factories``).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO

from bookshelf.codec import primitives as codec

from .validation import (
    encoded_length,
    validate_bounded_text,
    validate_number_range,
)

MAX_TITLE_LENGTH = 100
MAX_AUTHOR_LENGTH = 150
MAX_PUBLISHER_LENGTH = 300
MAX_PUBLISHING_DATE = 2021
MAX_GENRE_LENGTH = 100


class Record(ABC):
    """A self-describing value that can be stored in a collection."""

    @abstractmethod
    def write(self, stream: BinaryIO) -> None:
        """Serialise every field to ``stream`` in the record's fixed order.

        Raises:
            OSError: If the stream cannot be written
            RecordEncodeError: If a field cannot be represented on disk
        """

    @abstractmethod
    def invariant(self) -> bool:
        """Check that all field constraints hold."""

    @abstractmethod
    def describe(self) -> str:
        """Return a one-line human-readable rendering of the record."""


@dataclass(frozen=True)
class Book(Record):
    """A single book entry.

    Attributes:
        title: Book title, 1..100 characters
        author: Author name, 1..150 characters
        publisher: Publisher name, 1..300 characters
        date: Publication year, 0..2021
        genre: Genre, up to 100 characters, may be empty
    """

    title: str
    author: str
    publisher: str
    date: int
    genre: str = ""

    def __post_init__(self) -> None:
        """Validate book invariants."""
        validate_bounded_text(self.title, "title", MAX_TITLE_LENGTH)
        validate_bounded_text(self.author, "author", MAX_AUTHOR_LENGTH)
        validate_bounded_text(self.publisher, "publisher", MAX_PUBLISHER_LENGTH)
        validate_number_range(self.date, "date", 0, MAX_PUBLISHING_DATE)
        validate_bounded_text(
            self.genre, "genre", MAX_GENRE_LENGTH, allow_empty=True
        )

    def invariant(self) -> bool:
        try:
            return (
                0 < encoded_length(self.title) <= MAX_TITLE_LENGTH
                and 0 < encoded_length(self.author) <= MAX_AUTHOR_LENGTH
                and 0 < encoded_length(self.publisher) <= MAX_PUBLISHER_LENGTH
                and 0 <= self.date <= MAX_PUBLISHING_DATE
                and encoded_length(self.genre) <= MAX_GENRE_LENGTH
            )
        except UnicodeEncodeError:
            return False

    def write(self, stream: BinaryIO) -> None:
        codec.write_string(stream, self.title, MAX_TITLE_LENGTH)
        codec.write_string(stream, self.author, MAX_AUTHOR_LENGTH)
        codec.write_string(stream, self.publisher, MAX_PUBLISHER_LENGTH)
        codec.write_number(stream, self.date)
        codec.write_string(stream, self.genre, MAX_GENRE_LENGTH)

    def describe(self) -> str:
        return " ".join(
            [self.title, self.author, self.publisher, str(self.date), self.genre]
        )
