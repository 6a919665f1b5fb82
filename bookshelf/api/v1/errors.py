"""Error handlers for mapping domain errors to HTTP responses.

This module contains exception handlers that translate domain-specific
exceptions into appropriate HTTP responses with consistent error formatting.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookshelf.domain import (
    CollectionLoadError,
    CollectionSaveError,
    DomainError,
    ItemIndexError,
)
from bookshelf.domain import (
    ValidationError as DomainValidationError,
)
from bookshelf.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def _create_error_response(
    status_code: int,
    error_code: str,
    message: str,
    field: str | None = None,
    context: dict[str, Any] | None = None,
) -> JSONResponse:
    """Helper to create consistent error responses.

    Args:
        status_code: HTTP status code
        error_code: Error code string
        message: Error message
        field: Field name if error is field-specific
        context: Additional error context

    Returns:
        JSONResponse with consistent error format
    """
    error_response = ErrorResponse(
        error={
            "code": error_code,
            "message": message,
            "field": field,
            "context": context,
        }
    )
    return JSONResponse(status_code=status_code, content=error_response.model_dump())


def _create_validation_response(
    message: str, field: str | None = None
) -> JSONResponse:
    """Helper to create 422 validation error responses."""
    return _create_error_response(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        error_code="VALIDATION_ERROR",
        message=message,
        field=field,
    )


async def item_index_error_handler(
    request: Request, exc: ItemIndexError
) -> JSONResponse:
    """Handle ItemIndexError exceptions."""
    return _create_error_response(
        status_code=status.HTTP_404_NOT_FOUND,
        error_code="NOT_FOUND",
        message=f"Book with index '{exc.index}' not found",
        context={"index": exc.index, "size": exc.size},
    )


async def collection_load_error_handler(
    request: Request, exc: CollectionLoadError
) -> JSONResponse:
    """Handle CollectionLoadError exceptions."""
    return _create_error_response(
        status_code=status.HTTP_409_CONFLICT,
        error_code=exc.code,
        message=exc.message,
        context={"reason": exc.reason},
    )


async def collection_save_error_handler(
    request: Request, exc: CollectionSaveError
) -> JSONResponse:
    """Handle CollectionSaveError exceptions."""
    logger.error(exc.message)
    return _create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code=exc.code,
        message=exc.message,
        context={"reason": exc.reason},
    )


async def domain_validation_error_handler(
    request: Request, exc: DomainValidationError
) -> JSONResponse:
    """Handle domain ValidationError exceptions."""
    return _create_validation_response(exc.message, exc.field)


async def pydantic_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors."""
    # Extract the first error for simplicity
    first_error = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(loc) for loc in first_error.get("loc", []))
    message = first_error.get("msg", "Validation error")

    return _create_validation_response(message, field if field else None)


async def generic_domain_error_handler(
    request: Request, exc: DomainError
) -> JSONResponse:
    """Handle generic domain errors."""
    return _create_error_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        error_code=exc.code,
        message=exc.message,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("Unhandled error while serving request")
    return _create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code="INTERNAL_ERROR",
        message="An unexpected error occurred",
    )


# Error handler registry for easy registration
ERROR_HANDLERS = {
    ItemIndexError: item_index_error_handler,
    CollectionLoadError: collection_load_error_handler,
    CollectionSaveError: collection_save_error_handler,
    DomainValidationError: domain_validation_error_handler,
    RequestValidationError: pydantic_validation_error_handler,
    DomainError: generic_domain_error_handler,
    Exception: generic_exception_handler,
}
