"""Record factories that rebuild concrete records from a byte stream."""

from typing import BinaryIO

from bookshelf.domain import (
    MAX_AUTHOR_LENGTH,
    MAX_GENRE_LENGTH,
    MAX_PUBLISHER_LENGTH,
    MAX_TITLE_LENGTH,
    Book,
    RecordDecodeError,
    ValidationError,
)

from . import primitives


class BookFactory:
    """Reads Book records in the order ``Book.write`` emits them."""

    def read(self, stream: BinaryIO) -> Book:
        """Read one Book from ``stream``.

        Raises:
            RecordDecodeError: If the stream is truncated, a string exceeds its
                bound, or the decoded fields violate the Book invariant
        """
        title = primitives.read_string(stream, MAX_TITLE_LENGTH)
        author = primitives.read_string(stream, MAX_AUTHOR_LENGTH)
        publisher = primitives.read_string(stream, MAX_PUBLISHER_LENGTH)
        date = primitives.read_number(stream)
        genre = primitives.read_string(stream, MAX_GENRE_LENGTH)

        try:
            return Book(
                title=title,
                author=author,
                publisher=publisher,
                date=date,
                genre=genre,
            )
        except ValidationError as e:
            raise RecordDecodeError(e.message) from e
