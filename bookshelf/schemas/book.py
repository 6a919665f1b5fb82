"""Book schemas for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field

from bookshelf.domain import (
    MAX_AUTHOR_LENGTH,
    MAX_GENRE_LENGTH,
    MAX_PUBLISHER_LENGTH,
    MAX_PUBLISHING_DATE,
    MAX_TITLE_LENGTH,
    Book,
)


class BookBase(BaseModel):
    """Base schema for book data."""

    model_config = ConfigDict(strict=False, extra="forbid")

    title: str = Field(
        ..., min_length=1, max_length=MAX_TITLE_LENGTH, description="Book title"
    )
    author: str = Field(
        ..., min_length=1, max_length=MAX_AUTHOR_LENGTH, description="Author name"
    )
    publisher: str = Field(
        ...,
        min_length=1,
        max_length=MAX_PUBLISHER_LENGTH,
        description="Publisher name",
    )
    date: int = Field(
        ..., ge=0, le=MAX_PUBLISHING_DATE, description="Publication year"
    )
    genre: str = Field(default="", max_length=MAX_GENRE_LENGTH, description="Genre")

    def to_domain(self) -> Book:
        """Convert to domain Book (re-validates byte lengths)."""
        return Book(
            title=self.title,
            author=self.author,
            publisher=self.publisher,
            date=self.date,
            genre=self.genre,
        )


class BookCreate(BookBase):
    """Schema for adding a new book."""

    pass


class BookUpdate(BookBase):
    """Schema for replacing the book at an index."""

    pass


class BookOut(BookBase):
    """Schema for book responses."""

    index: int = Field(..., ge=0, description="Slot index in the collection")
    removed: bool = Field(False, description="Whether the slot is a tombstone")

    @classmethod
    def from_domain(cls, index: int, book: Book, removed: bool = False) -> "BookOut":
        return cls(
            index=index,
            removed=removed,
            title=book.title,
            author=book.author,
            publisher=book.publisher,
            date=book.date,
            genre=book.genre,
        )


class BookList(BaseModel):
    """Schema for live book listings."""

    model_config = ConfigDict(strict=False, extra="forbid")

    books: list[BookOut] = Field(..., description="Live books in index order")
    total: int = Field(..., ge=0, description="Number of live books")

    @classmethod
    def from_domain_list(cls, books: list[tuple[int, Book]]) -> "BookList":
        return cls(
            books=[BookOut.from_domain(index, book) for index, book in books],
            total=len(books),
        )
