"""
Pytest fixtures for the vinylstock test suite.

Provides:
- In-memory and JSON-file record stores
- A valid editor form and a backend that fails on demand
"""

import pytest

from vinylstock.core.backends import JsonFileBackend, MemoryBackend
from vinylstock.core.errors import StoreUnavailable
from vinylstock.core.record_store import RecordStore


@pytest.fixture
def record_fields():
    return {
        "album_name": "Final Countdown",
        "band_name": "Europe",
        "quantity": 10,
        "price": 5,
        "cover_image_path": "img://1",
        "supplier_name": "Virgin",
        "supplier_email": "order@virgin.com",
    }


@pytest.fixture
def store():
    return RecordStore(MemoryBackend())


@pytest.fixture
def records_path(tmp_path):
    return tmp_path / "data" / "records.json"


@pytest.fixture
def file_store(records_path):
    return RecordStore(JsonFileBackend(records_path))


class FlakyBackend(MemoryBackend):
    """MemoryBackend whose save() raises while `broken` is set."""

    def __init__(self) -> None:
        super().__init__()
        self.broken = False

    def save(self, records, next_id) -> None:
        if self.broken:
            raise StoreUnavailable("disk full")
        super().save(records, next_id)


@pytest.fixture
def flaky_backend():
    return FlakyBackend()
