"""Persistence backends for the record store (in-memory and JSON file)."""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Tuple

from vinylstock.core.errors import StoreUnavailable, ValidationError
from vinylstock.core.validation import validate_fields
from vinylstock.models.record import Record

logger = logging.getLogger(__name__)

Snapshot = Tuple[List[Record], int]  # (records in insertion order, next_id)


class MemoryBackend:
    """Keeps the last saved snapshot in memory."""

    def __init__(self) -> None:
        self._records: List[Record] = []
        self._next_id = 1

    def load(self) -> Snapshot:
        return list(self._records), self._next_id

    def save(self, records: List[Record], next_id: int) -> None:
        self._records = list(records)
        self._next_id = next_id


def _record_to_dict(r: Record) -> dict:
    return {
        "record_id": r.record_id,
        "album_name": r.album_name,
        "band_name": r.band_name,
        "quantity": r.quantity,
        "price": r.price,
        "cover_image_path": r.cover_image_path,
        "supplier_name": r.supplier_name,
        "supplier_email": r.supplier_email,
    }


class JsonFileBackend:
    """Persist records as one JSON document: {"next_id": n, "records": [...]}."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> Snapshot:
        if not self.path.exists():
            return [], 1
        try:
            data = json.loads(self.path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            raise StoreUnavailable(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict) or not isinstance(data.get("records", []), list):
            raise StoreUnavailable(f"Cannot read {self.path}: not a records document")
        try:
            stored_next_id = int(data.get("next_id", 1))
        except (TypeError, ValueError) as e:
            raise StoreUnavailable(f"Cannot read {self.path}: bad next_id") from e
        out = []
        seen = set()
        for item in data.get("records", []):
            try:
                row = dict(item)
                record_id = int(row.pop("record_id"))
                if record_id in seen:
                    raise ValueError(f"duplicate record_id {record_id}")
                values = validate_fields(row)
            except (KeyError, TypeError, ValueError, ValidationError):
                logger.warning("Skipping malformed record in %s: %r", self.path, item)
                continue
            seen.add(record_id)
            out.append(Record(record_id=record_id, **values))
        next_id = max(stored_next_id, max(seen, default=0) + 1)
        return out, next_id

    def save(self, records: List[Record], next_id: int) -> None:
        data = {
            "next_id": next_id,
            "records": [_record_to_dict(r) for r in records],
        }
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Write beside the target so os.replace stays on one filesystem
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=self.path.name, suffix=".tmp"
            )
            with os.fdopen(fd, "w") as f:
                f.write(json.dumps(data, indent=2))
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StoreUnavailable(f"Cannot write {self.path}: {e}") from e
