"""Thread-safe in-memory repository implementations."""

from .collection import ItemCollection, Slot

__all__ = [
    "ItemCollection",
    "Slot",
]
