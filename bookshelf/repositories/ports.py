"""Repository interfaces for dependency inversion."""

from pathlib import Path
from typing import BinaryIO, Protocol

from bookshelf.domain import Record


class RecordFactory(Protocol):
    """Reconstructs a concrete record from a byte stream.

    The collection hands every stored record back through this hook, so it
    never has to name a concrete record type.
    """

    def read(self, stream: BinaryIO) -> Record:
        """Read one record, raising RecordDecodeError on malformed input"""
        ...


class RecordCollection(Protocol):
    """Repository interface for index-addressed record collections."""

    def add_item(self, record: Record) -> int:
        """Append a record and return its index"""
        ...

    def remove_item(self, index: int) -> None:
        """Mark the slot at index as removed"""
        ...

    def update_item(self, index: int, record: Record) -> None:
        """Replace the record at index"""
        ...

    def get_item(self, index: int) -> Record:
        """Retrieve the record at index, removed or not"""
        ...

    def is_removed(self, index: int) -> bool:
        """Check whether the slot at index is a tombstone"""
        ...

    def get_size(self) -> int:
        """Get the slot count including tombstones"""
        ...

    def list_live(self) -> list[tuple[int, Record]]:
        """Retrieve (index, record) pairs of slots that are not removed"""
        ...

    def clean(self) -> int:
        """Purge removed slots, returning how many were dropped"""
        ...

    def load_collection(self, path: str | Path) -> int:
        """Replace the collection with the records stored at path"""
        ...

    def save_collection(self, path: str | Path) -> int:
        """Persist live records to path"""
        ...
