"""Shared application state (injected into routes)."""
from vinylstock.config import RECORDS_PATH
from vinylstock.core.backends import JsonFileBackend
from vinylstock.core.record_store import RecordStore


class AppState:
    def __init__(self, store: RecordStore | None = None) -> None:
        self._store = store

    @property
    def store(self) -> RecordStore:
        # Opened lazily so importing the app does not touch the data dir
        if self._store is None:
            self._store = RecordStore(JsonFileBackend(RECORDS_PATH))
        return self._store


_state = AppState()


def get_state() -> AppState:
    return _state
