"""Reader-writer lock guarding the in-memory collection.

Any number of readers (get, view, save) may hold the lock together; a writer
(add, remove, update, clean, load) holds it alone. Waiting writers block new
readers so a steady stream of views cannot starve a mutation.
"""

import threading
from collections.abc import Generator
from contextlib import contextmanager


class RWLock:
    """Reader-writer lock with writer priority."""

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writers_waiting = 0
        self._writer_active = False

    @contextmanager
    def read_lock(self) -> Generator[None, None, None]:
        """Hold the lock shared for the duration of the block."""
        with self._condition:
            while self._writer_active or self._writers_waiting:
                self._condition.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._condition:
                self._readers -= 1
                if not self._readers:
                    self._condition.notify_all()

    @contextmanager
    def write_lock(self) -> Generator[None, None, None]:
        """Hold the lock exclusively for the duration of the block."""
        with self._condition:
            self._writers_waiting += 1
            try:
                while self._readers or self._writer_active:
                    self._condition.wait()
                self._writer_active = True
            finally:
                self._writers_waiting -= 1
        try:
            yield
        finally:
            with self._condition:
                self._writer_active = False
                self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        with self._condition:
            return self._readers

    @property
    def writer_active(self) -> bool:
        with self._condition:
            return self._writer_active
