"""Service layer for the book collection.

This package contains the use cases shared by the command interpreter and the
HTTP API, keeping them separate from parsing and transport concerns.
"""

from .collection_service import (
    BookCollectionService,
    parse_book_fields,
    parse_date,
    parse_index,
)

__all__ = [
    "BookCollectionService",
    "parse_book_fields",
    "parse_date",
    "parse_index",
]
