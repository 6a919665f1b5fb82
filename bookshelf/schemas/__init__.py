"""API schemas for the book collection.

This package contains Pydantic models for API request/response validation
and serialization. These schemas serve as the contract between the API
and its clients.
"""

from .book import BookBase, BookCreate, BookList, BookOut, BookUpdate
from .collection import CollectionFileRequest, CollectionStatus
from .errors import ErrorDetail, ErrorResponse
from .health import HealthResponse

__all__ = [
    # Book
    "BookBase",
    "BookCreate",
    "BookList",
    "BookOut",
    "BookUpdate",
    # Collection
    "CollectionFileRequest",
    "CollectionStatus",
    # Errors
    "ErrorDetail",
    "ErrorResponse",
    # Health
    "HealthResponse",
]
