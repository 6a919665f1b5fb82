"""Unit tests for the in-memory ItemCollection."""

import pytest

from bookshelf.domain import Book, ItemIndexError
from bookshelf.repositories.in_memory import ItemCollection
from tests.conftest import make_books


def snapshot(collection: ItemCollection) -> list[tuple[Book, bool]]:
    return [
        (collection.get_item(i), collection.is_removed(i))
        for i in range(collection.get_size())
    ]


class TestItemCollection:
    """Test suite for ItemCollection slot operations."""

    def test_starts_empty(self, collection: ItemCollection):
        """Test that a new collection has no slots."""
        assert collection.get_size() == 0
        assert len(collection) == 0
        assert collection.list_live() == []

    def test_add_item_returns_previous_size(self, collection: ItemCollection):
        """Test that each added record gets the next index."""
        books = make_books(3)

        indices = [collection.add_item(book) for book in books]

        assert indices == [0, 1, 2]
        assert collection.get_size() == 3
        assert [collection.get_item(i) for i in range(3)] == books
        assert not any(collection.is_removed(i) for i in range(3))

    def test_remove_keeps_indices_stable(self, collection: ItemCollection):
        """Test that removing one slot does not shift the others."""
        books = make_books(5)
        for book in books:
            collection.add_item(book)

        collection.remove_item(2)

        assert collection.is_removed(2)
        assert collection.get_size() == 5
        for j in (0, 1, 3, 4):
            assert collection.get_item(j) == books[j]
            assert not collection.is_removed(j)

    def test_get_item_returns_removed_record(self, collection: ItemCollection):
        """Test that a tombstone still exposes its record."""
        book = make_books(1)[0]
        collection.add_item(book)
        collection.remove_item(0)

        assert collection.get_item(0) == book

    def test_remove_twice_is_noop(self, collection: ItemCollection):
        """Test that removing an already-removed slot changes nothing."""
        for book in make_books(2):
            collection.add_item(book)
        collection.remove_item(0)
        before = snapshot(collection)

        collection.remove_item(0)

        assert snapshot(collection) == before

    def test_update_replaces_in_place(
        self, collection: ItemCollection, sample_book: Book
    ):
        """Test that update swaps the record without moving it."""
        books = make_books(3)
        for book in books:
            collection.add_item(book)

        collection.update_item(1, sample_book)

        assert collection.get_item(1) == sample_book
        assert collection.get_item(0) == books[0]
        assert collection.get_item(2) == books[2]
        assert collection.get_size() == 3

    def test_update_unremoves_slot(
        self, collection: ItemCollection, sample_book: Book
    ):
        """Test that updating a removed slot makes it live again."""
        collection.add_item(make_books(1)[0])
        collection.remove_item(0)

        collection.update_item(0, sample_book)

        assert not collection.is_removed(0)
        assert collection.list_live() == [(0, sample_book)]

    def test_list_live_skips_removed(self, collection: ItemCollection):
        """Test that live listing keeps original indices."""
        books = make_books(4)
        for book in books:
            collection.add_item(book)
        collection.remove_item(0)
        collection.remove_item(2)

        assert collection.list_live() == [(1, books[1]), (3, books[3])]

    def test_clean_compacts(self, collection: ItemCollection):
        """Test that clean drops tombstones and renumbers survivors."""
        books = make_books(4)
        for book in books:
            collection.add_item(book)
        collection.remove_item(1)
        collection.remove_item(3)

        dropped = collection.clean()

        assert dropped == 2
        assert collection.get_size() == 2
        assert collection.list_live() == [(0, books[0]), (1, books[2])]
        assert not collection.is_removed(0)
        assert not collection.is_removed(1)

    def test_clean_is_idempotent(self, collection: ItemCollection):
        """Test that cleaning twice equals cleaning once."""
        for book in make_books(5):
            collection.add_item(book)
        collection.remove_item(0)
        collection.remove_item(4)

        collection.clean()
        once = snapshot(collection)
        assert collection.clean() == 0

        assert snapshot(collection) == once

    def test_add_after_clean_uses_new_index(
        self, collection: ItemCollection, sample_book: Book
    ):
        """Test that a record added after clean gets the compacted index."""
        collection.add_item(make_books(1)[0])
        collection.remove_item(0)
        collection.clean()

        assert collection.add_item(sample_book) == 0

    def test_clear(self, collection: ItemCollection):
        """Test that clear drops every slot."""
        for book in make_books(3):
            collection.add_item(book)

        collection.clear()

        assert collection.get_size() == 0


class TestItemCollectionBounds:
    """Out-of-range access must fail without corrupting state."""

    @pytest.fixture
    def populated(self, collection: ItemCollection) -> ItemCollection:
        for book in make_books(3):
            collection.add_item(book)
        collection.remove_item(1)
        return collection

    @pytest.mark.parametrize("index", [3, 4, 100, -1])
    def test_get_item_out_of_range(self, populated: ItemCollection, index: int):
        """Test get_item with an invalid index."""
        before = snapshot(populated)

        with pytest.raises(ItemIndexError) as exc_info:
            populated.get_item(index)

        assert exc_info.value.index == index
        assert exc_info.value.size == 3
        assert snapshot(populated) == before

    @pytest.mark.parametrize("index", [3, -1])
    def test_remove_item_out_of_range(self, populated: ItemCollection, index: int):
        """Test remove_item with an invalid index."""
        before = snapshot(populated)

        with pytest.raises(ItemIndexError):
            populated.remove_item(index)

        assert snapshot(populated) == before

    @pytest.mark.parametrize("index", [3, -1])
    def test_update_item_out_of_range(
        self, populated: ItemCollection, sample_book: Book, index: int
    ):
        """Test update_item with an invalid index."""
        before = snapshot(populated)

        with pytest.raises(ItemIndexError):
            populated.update_item(index, sample_book)

        assert snapshot(populated) == before

    @pytest.mark.parametrize("index", [3, -1])
    def test_is_removed_out_of_range(self, populated: ItemCollection, index: int):
        """Test is_removed with an invalid index."""
        with pytest.raises(ItemIndexError):
            populated.is_removed(index)

    def test_empty_collection_rejects_index_zero(self, collection: ItemCollection):
        """Test that index 0 is out of range on an empty collection."""
        with pytest.raises(ItemIndexError):
            collection.get_item(0)
