"""Domain layer for the book collection.

This package contains the record abstraction, the Book entity and the
domain-specific exceptions. It's framework-agnostic and holds the field
rules every record must satisfy.
"""

from .errors import (
    ArgumentCountError,
    ArgumentParseError,
    CodecError,
    CollectionError,
    CollectionLoadError,
    CollectionSaveError,
    CommandError,
    DomainError,
    ItemIndexError,
    RecordDecodeError,
    RecordEncodeError,
    UnknownCommandError,
    ValidationError,
)
from .entities import (
    MAX_AUTHOR_LENGTH,
    MAX_GENRE_LENGTH,
    MAX_PUBLISHER_LENGTH,
    MAX_PUBLISHING_DATE,
    MAX_TITLE_LENGTH,
    Book,
    Record,
)

__all__ = [
    # Entities
    "Record",
    "Book",
    "MAX_TITLE_LENGTH",
    "MAX_AUTHOR_LENGTH",
    "MAX_PUBLISHER_LENGTH",
    "MAX_PUBLISHING_DATE",
    "MAX_GENRE_LENGTH",
    # Errors
    "DomainError",
    "ValidationError",
    "CollectionError",
    "ItemIndexError",
    "CollectionLoadError",
    "CollectionSaveError",
    "CodecError",
    "RecordDecodeError",
    "RecordEncodeError",
    "CommandError",
    "UnknownCommandError",
    "ArgumentCountError",
    "ArgumentParseError",
]
