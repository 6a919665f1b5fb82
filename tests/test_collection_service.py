"""Unit tests for BookCollectionService and its argument parsers."""

from pathlib import Path

import pytest

from bookshelf.domain import (
    ArgumentParseError,
    Book,
    CollectionLoadError,
    ItemIndexError,
    ValidationError,
)
from bookshelf.services import (
    BookCollectionService,
    parse_book_fields,
    parse_date,
    parse_index,
)
from tests.conftest import capture_logger


class TestParsers:
    """Test cases for raw argument parsing."""

    def test_parse_index(self):
        assert parse_index("0") == 0
        assert parse_index("42") == 42

    @pytest.mark.parametrize(
        "value", ["x", "1.5", "", "-1", "1_0", "+0", " 12 ", "\u0661"]
    )
    def test_parse_index_invalid(self, value: str):
        """Test that non-integer or negative indices are rejected."""
        with pytest.raises(ArgumentParseError) as exc_info:
            parse_index(value)

        assert exc_info.value.argument == "index"

    def test_parse_date(self):
        assert parse_date("2020") == 2020

    def test_parse_date_invalid(self):
        """Test that a non-numeric date is a typed error, not a crash."""
        with pytest.raises(ArgumentParseError) as exc_info:
            parse_date("twenty")

        assert exc_info.value.value == "twenty"

    @pytest.mark.parametrize("value", ["1_999", "+2020", " 2020", "2020\n", "\uff12"])
    def test_parse_date_requires_plain_digits(self, value: str):
        """Test that only an optional minus and ASCII digits are accepted."""
        with pytest.raises(ArgumentParseError):
            parse_date(value)

    def test_parse_book_fields(self):
        """Test building a Book from string arguments."""
        book = parse_book_fields("A", "B", "C", "2020", "D")

        assert book == Book("A", "B", "C", 2020, "D")

    def test_parse_book_fields_out_of_range_date(self):
        """Test that an out-of-range year surfaces as a validation error."""
        with pytest.raises(ValidationError) as exc_info:
            parse_book_fields("A", "B", "C", "2022", "D")

        assert exc_info.value.field == "date"


class TestBookCollectionService:
    """Test cases for the collection use cases."""

    def test_add_and_list(self, service: BookCollectionService, sample_book: Book):
        """Test that added books are listed with their indices."""
        assert service.add_book(sample_book) == 0

        assert service.list_books() == [(0, sample_book)]
        assert service.count() == 1
        assert service.size() == 1

    def test_remove_then_count(
        self, service: BookCollectionService, sample_book: Book
    ):
        """Test that removed books leave the size but not the count."""
        service.add_book(sample_book)
        service.remove_book(0)

        assert service.count() == 0
        assert service.size() == 1
        assert service.is_removed(0)
        assert service.get_book(0) == sample_book

    def test_update_book(self, service: BookCollectionService, sample_book: Book):
        """Test replacing a book by index."""
        service.add_book(sample_book)
        replacement = Book("E", "F", "G", 2021, "H")

        result = service.update_book(0, replacement)

        assert result == replacement
        assert service.get_book(0) == replacement

    def test_update_missing_index(
        self, service: BookCollectionService, sample_book: Book
    ):
        with pytest.raises(ItemIndexError):
            service.update_book(0, sample_book)

    def test_clean(self, service: BookCollectionService, sample_book: Book):
        """Test that clean reports how many slots were dropped."""
        service.add_book(sample_book)
        service.add_book(sample_book)
        service.remove_book(0)

        assert service.clean() == 1
        assert service.size() == 1

    def test_save_and_load(
        self, service: BookCollectionService, sample_book: Book, tmp_path: Path
    ):
        """Test persistence through the service."""
        path = tmp_path / "books.data"
        service.add_book(sample_book)

        assert service.save(path) == 1
        service.remove_book(0)
        assert service.load(path) == 1
        assert service.list_books() == [(0, sample_book)]

    def test_load_missing_file(self, service: BookCollectionService, tmp_path: Path):
        with pytest.raises(CollectionLoadError):
            service.load(tmp_path / "missing.data")

    def test_mutations_are_logged(
        self, service: BookCollectionService, sample_book: Book, caplog
    ):
        """Test that the service logs each mutation."""
        logger_name = "bookshelf.services.collection_service"
        with capture_logger(caplog, logger_name):
            service.add_book(sample_book)
            service.remove_book(0)

        messages = [record.getMessage() for record in caplog.records]
        assert "Added book at index 0: 'Dune'" in messages
        assert "Removed book at index 0" in messages
