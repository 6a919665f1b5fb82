"""Book management endpoints."""

from fastapi import APIRouter, Depends, Path, status

from bookshelf.api.v1.deps import get_collection_service
from bookshelf.schemas import BookCreate, BookList, BookOut, BookUpdate
from bookshelf.services import BookCollectionService

router = APIRouter(prefix="/books", tags=["books"])


@router.get(
    "/",
    response_model=BookList,
    status_code=status.HTTP_200_OK,
    summary="List live books",
    description="Retrieve every book that has not been removed, in index order",
)
async def list_books(
    service: BookCollectionService = Depends(get_collection_service),
) -> BookList:
    """List live books with their indices."""
    return BookList.from_domain_list(service.list_books())


@router.get(
    "/{index}",
    response_model=BookOut,
    status_code=status.HTTP_200_OK,
    summary="Get a book by index",
    description="Retrieve the book at a slot index, including removed slots",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Index out of range"}},
)
async def get_book(
    index: int = Path(..., ge=0, description="Slot index"),
    service: BookCollectionService = Depends(get_collection_service),
) -> BookOut:
    """Get a book by its slot index."""
    book = service.get_book(index)
    return BookOut.from_domain(index, book, removed=service.is_removed(index))


@router.post(
    "/",
    response_model=BookOut,
    status_code=status.HTTP_201_CREATED,
    summary="Add a book",
    description="Append a book at the end of the collection",
    responses={
        status.HTTP_422_UNPROCESSABLE_CONTENT: {"description": "Validation error"},
    },
)
async def add_book(
    book_data: BookCreate,
    service: BookCollectionService = Depends(get_collection_service),
) -> BookOut:
    """Add a new book."""
    book = book_data.to_domain()
    index = service.add_book(book)
    return BookOut.from_domain(index, book)


@router.put(
    "/{index}",
    response_model=BookOut,
    status_code=status.HTTP_200_OK,
    summary="Replace a book",
    description="Replace the book at a slot index; a removed slot becomes live again",
    responses={
        status.HTTP_404_NOT_FOUND: {"description": "Index out of range"},
        status.HTTP_422_UNPROCESSABLE_CONTENT: {"description": "Validation error"},
    },
)
async def update_book(
    book_data: BookUpdate,
    index: int = Path(..., ge=0, description="Slot index"),
    service: BookCollectionService = Depends(get_collection_service),
) -> BookOut:
    """Replace the book at an index."""
    book = service.update_book(index, book_data.to_domain())
    return BookOut.from_domain(index, book)


@router.delete(
    "/{index}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a book",
    description="Mark the slot at an index as removed; later indices do not shift",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Index out of range"}},
)
async def remove_book(
    index: int = Path(..., ge=0, description="Slot index"),
    service: BookCollectionService = Depends(get_collection_service),
) -> None:
    """Remove a book by its slot index."""
    service.remove_book(index)
