"""Thread-safe in-memory RecordCollection implementation."""

import io
import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path

from bookshelf.domain import (
    CollectionLoadError,
    CollectionSaveError,
    ItemIndexError,
    Record,
    RecordDecodeError,
    RecordEncodeError,
)
from bookshelf.codec.primitives import at_end
from bookshelf.repositories.ports import RecordCollection, RecordFactory
from bookshelf.utils import RWLock

logger = logging.getLogger(__name__)


@dataclass
class Slot:
    """A collection position holding a record and its removed flag."""

    record: Record
    removed: bool = False


class ItemCollection(RecordCollection):
    """Index-addressed record storage with tombstone removal.

    Removing a record only flags its slot, so indices stay stable for the
    whole session; ``clean`` and ``load_collection`` are the only operations
    that renumber slots.
    """

    def __init__(self, factory: RecordFactory, atomic_save: bool = True) -> None:
        self._factory = factory
        self._atomic_save = atomic_save
        self._slots: list[Slot] = []
        self._lock = RWLock()

    def _slot(self, index: int) -> Slot:
        if not 0 <= index < len(self._slots):
            raise ItemIndexError(index, len(self._slots))
        return self._slots[index]

    def add_item(self, record: Record) -> int:
        assert record.invariant()
        with self._lock.write_lock():
            self._slots.append(Slot(record))
            return len(self._slots) - 1

    def remove_item(self, index: int) -> None:
        with self._lock.write_lock():
            slot = self._slot(index)
            if slot.removed:
                logger.debug(f"Slot {index} already removed")
            slot.removed = True

    def update_item(self, index: int, record: Record) -> None:
        assert record.invariant()
        with self._lock.write_lock():
            self._slot(index)
            self._slots[index] = Slot(record)

    def get_item(self, index: int) -> Record:
        with self._lock.read_lock():
            return self._slot(index).record

    def is_removed(self, index: int) -> bool:
        with self._lock.read_lock():
            return self._slot(index).removed

    def get_size(self) -> int:
        with self._lock.read_lock():
            return len(self._slots)

    def __len__(self) -> int:
        return self.get_size()

    def list_live(self) -> list[tuple[int, Record]]:
        with self._lock.read_lock():
            return [
                (index, slot.record)
                for index, slot in enumerate(self._slots)
                if not slot.removed
            ]

    def clean(self) -> int:
        with self._lock.write_lock():
            before = len(self._slots)
            self._slots = [slot for slot in self._slots if not slot.removed]
            return before - len(self._slots)

    def clear(self) -> None:
        with self._lock.write_lock():
            self._slots.clear()

    def load_collection(self, path: str | Path) -> int:
        """Replace the collection with the records stored at ``path``.

        The whole file is parsed before any state changes; on failure the
        collection is left exactly as it was.

        Returns:
            Number of records loaded

        Raises:
            CollectionLoadError: If the file cannot be opened or parsed
        """
        records: list[Record] = []
        try:
            with open(path, "rb") as stream:
                while not at_end(stream):
                    records.append(self._factory.read(stream))
        except OSError as e:
            raise CollectionLoadError(str(path), e.strerror or str(e)) from e
        except RecordDecodeError as e:
            raise CollectionLoadError(
                str(path), f"record {len(records)}: {e.reason}"
            ) from e

        with self._lock.write_lock():
            self._slots = [Slot(record) for record in records]

        logger.debug(f"Loaded {len(records)} records from {path}")
        return len(records)

    def save_collection(self, path: str | Path) -> int:
        """Persist every live record to ``path`` in index order.

        Removed slots are not written. Records are encoded in memory first,
        so an encoding failure never touches the target file.

        Returns:
            Number of records written

        Raises:
            CollectionSaveError: If encoding or writing fails
        """
        live = self.list_live()
        buffer = io.BytesIO()
        try:
            for _, record in live:
                record.write(buffer)
        except RecordEncodeError as e:
            raise CollectionSaveError(str(path), e.reason) from e

        try:
            if self._atomic_save:
                self._write_atomic(Path(path), buffer.getvalue())
            else:
                with open(path, "wb") as stream:
                    stream.write(buffer.getvalue())
        except OSError as e:
            raise CollectionSaveError(str(path), e.strerror or str(e)) from e

        logger.debug(f"Saved {len(live)} records to {path}")
        return len(live)

    @staticmethod
    def _write_atomic(target: Path, payload: bytes) -> None:
        """Write ``payload`` to a sibling temp file, then rename it over ``target``.

        A symlinked target is written through to the file it points at, and
        the replacement keeps the existing file's permission bits (or the
        umask default for a new file).
        """
        target = Path(os.path.realpath(target))
        mode = _replacement_mode(target)
        fd, temp_name = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as stream:
                stream.write(payload)
                stream.flush()
                os.fsync(stream.fileno())
            os.chmod(temp_name, mode)
            os.replace(temp_name, target)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise


def _replacement_mode(target: Path) -> int:
    """Permission bits for a file about to replace ``target``."""
    try:
        return stat.S_IMODE(os.stat(target).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
