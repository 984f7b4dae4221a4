"""Record store: CRUD and stock adjustment over the inventory collection."""
import logging
import threading
from dataclasses import replace
from typing import Any, Callable, Iterator, List, Mapping, Optional

from vinylstock.core.backends import MemoryBackend
from vinylstock.core.errors import InvalidAdjustment, NotFound, ValidationError
from vinylstock.core.events import ChangeNotifier, Subscriber
from vinylstock.core.validation import validate_fields
from vinylstock.models.record import ChangeEvent, Record, RecordSummary

logger = logging.getLogger(__name__)


class RecordStore:
    """Single authority for reading and mutating records.

    Every mutation runs under one lock: the change is applied to a copy of the
    collection, saved through the backend, and only then swapped in. A backend
    failure (StoreUnavailable) therefore leaves the store untouched. Observers
    are notified after the lock is released.
    """

    def __init__(self, backend=None, notifier: Optional[ChangeNotifier] = None) -> None:
        self._backend = backend if backend is not None else MemoryBackend()
        self._notifier = notifier if notifier is not None else ChangeNotifier()
        self._lock = threading.Lock()
        records, self._next_id = self._backend.load()
        self._records: List[Record] = records
        logger.debug("Loaded %d records (next id %d)", len(records), self._next_id)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register for ChangeEvents; returns an unsubscribe function."""
        return self._notifier.subscribe(callback)

    def _index(self, record_id: int) -> int:
        for i, r in enumerate(self._records):
            if r.record_id == record_id:
                return i
        raise NotFound(record_id)

    def _commit(self, records: List[Record], next_id: int) -> None:
        # Caller holds the lock
        self._backend.save(records, next_id)
        self._records = records
        self._next_id = next_id

    def list_records(self) -> Iterator[RecordSummary]:
        """Summaries in insertion order; each call starts a fresh iterator."""
        with self._lock:
            snapshot = tuple(self._records)
        return (r.summary() for r in snapshot)

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def get(self, record_id: int) -> Record:
        with self._lock:
            return self._records[self._index(record_id)]

    def create(self, fields: Mapping[str, Any]) -> int:
        """Validate and insert a new record; returns its id."""
        values = validate_fields(fields)
        with self._lock:
            record_id = self._next_id
            record = Record(record_id=record_id, **values)
            self._commit(self._records + [record], record_id + 1)
        logger.info("Created record %d: %s by %s", record_id, record.album_name, record.band_name)
        self._notifier.publish(ChangeEvent("created", record_id))
        return record_id

    def update(self, record_id: int, fields: Mapping[str, Any]) -> None:
        """Replace every mutable field of an existing record."""
        values = validate_fields(fields)
        with self._lock:
            i = self._index(record_id)
            records = list(self._records)
            records[i] = Record(record_id=record_id, **values)
            self._commit(records, self._next_id)
        logger.info("Updated record %d", record_id)
        self._notifier.publish(ChangeEvent("updated", record_id))

    def adjust_quantity(self, record_id: int, delta: int) -> int:
        """Atomically add delta to quantity; returns the new quantity."""
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise ValidationError("quantity", "Stock adjustment must be a whole number")
        with self._lock:
            i = self._index(record_id)
            current = self._records[i]
            new_quantity = current.quantity + delta
            if new_quantity < 0:
                logger.warning(
                    "Rejected stock change on record %d: %d %+d", record_id, current.quantity, delta
                )
                raise InvalidAdjustment(record_id, current.quantity, delta)
            records = list(self._records)
            records[i] = replace(current, quantity=new_quantity)
            self._commit(records, self._next_id)
        logger.info("Record %d quantity %d -> %d", record_id, current.quantity, new_quantity)
        self._notifier.publish(ChangeEvent("quantity", record_id))
        return new_quantity

    def sell_one(self, record_id: int) -> int:
        """List-item sale button: one copy out of stock."""
        return self.adjust_quantity(record_id, -1)

    def delete(self, record_id: int) -> int:
        """Remove one record; returns rows removed (0 if it did not exist)."""
        with self._lock:
            try:
                i = self._index(record_id)
            except NotFound:
                logger.debug("Delete of missing record %s", record_id)
                return 0
            records = list(self._records)
            records.pop(i)
            self._commit(records, self._next_id)
        logger.info("Deleted record %d", record_id)
        self._notifier.publish(ChangeEvent("deleted", record_id))
        return 1

    def delete_all(self) -> int:
        """Remove every record; returns rows removed."""
        with self._lock:
            rows = len(self._records)
            if rows == 0:
                return 0
            self._commit([], self._next_id)
        logger.info("%d rows deleted from records store", rows)
        self._notifier.publish(ChangeEvent("cleared", None, rows=rows))
        return rows


SAMPLE_RECORD = {
    "album_name": "Final Countdown",
    "band_name": "Europe",
    "quantity": 10,
    "price": 5,
    "cover_image_path": "img://the_final_countdown_single",
    "supplier_name": "Virgin",
    "supplier_email": "order@virgin.com",
}


def insert_sample_record(store: RecordStore) -> int:
    """Catalog "insert dummy data" action."""
    return store.create(SAMPLE_RECORD)
