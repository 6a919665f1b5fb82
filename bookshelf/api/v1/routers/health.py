"""Health check endpoints."""

from fastapi import APIRouter, Depends, status

from bookshelf.api.v1.deps import get_collection_service
from bookshelf.core.config import settings
from bookshelf.schemas.health import HealthResponse
from bookshelf.services import BookCollectionService

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Check if the API is running and healthy",
)
async def health_check(
    service: BookCollectionService = Depends(get_collection_service),
) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status=settings.health_status,
        message=settings.health_message,
        books=service.count(),
    )
