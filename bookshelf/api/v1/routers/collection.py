"""Collection-level endpoints: clean, load and save."""

from pathlib import Path

from fastapi import APIRouter, Body, Depends, status

from bookshelf.api.v1.deps import get_collection_service
from bookshelf.core.config import settings
from bookshelf.schemas import CollectionFileRequest, CollectionStatus
from bookshelf.services import BookCollectionService

router = APIRouter(prefix="/collection", tags=["collection"])


def resolve_data_file(request: CollectionFileRequest | None) -> Path:
    """Resolve the requested file name inside the configured data directory."""
    filename = request.filename if request and request.filename else None
    return settings.data_dir / (filename or settings.default_data_file)


def _status(
    service: BookCollectionService, affected: int = 0, filename: str | None = None
) -> CollectionStatus:
    return CollectionStatus(
        size=service.size(),
        live=service.count(),
        affected=affected,
        filename=filename,
    )


@router.get(
    "/",
    response_model=CollectionStatus,
    status_code=status.HTTP_200_OK,
    summary="Collection status",
    description="Report slot count and live book count",
)
async def collection_status(
    service: BookCollectionService = Depends(get_collection_service),
) -> CollectionStatus:
    """Report collection counters."""
    return _status(service)


@router.post(
    "/clean",
    response_model=CollectionStatus,
    status_code=status.HTTP_200_OK,
    summary="Purge removed books",
    description="Drop removed slots and renumber the remaining books contiguously",
)
async def clean_collection(
    service: BookCollectionService = Depends(get_collection_service),
) -> CollectionStatus:
    """Purge removed slots."""
    dropped = service.clean()
    return _status(service, affected=dropped)


@router.post(
    "/load",
    response_model=CollectionStatus,
    status_code=status.HTTP_200_OK,
    summary="Load the collection",
    description="Replace the collection with the contents of a data file",
    responses={
        status.HTTP_409_CONFLICT: {"description": "File missing or malformed"},
    },
)
async def load_collection(
    request: CollectionFileRequest | None = Body(None),
    service: BookCollectionService = Depends(get_collection_service),
) -> CollectionStatus:
    """Load the collection from a data file."""
    path = resolve_data_file(request)
    loaded = service.load(path)
    return _status(service, affected=loaded, filename=path.name)


@router.post(
    "/save",
    response_model=CollectionStatus,
    status_code=status.HTTP_200_OK,
    summary="Save the collection",
    description="Write every live book to a data file",
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Write failure"},
    },
)
async def save_collection(
    request: CollectionFileRequest | None = Body(None),
    service: BookCollectionService = Depends(get_collection_service),
) -> CollectionStatus:
    """Save the collection to a data file."""
    path = resolve_data_file(request)
    saved = service.save(path)
    return _status(service, affected=saved, filename=path.name)
