"""Errors raised by the record store and editor sessions."""
from typing import Optional


class RecordStoreError(Exception):
    """Base class for inventory errors."""


class ValidationError(RecordStoreError):
    """A required field is missing/blank or a numeric field does not parse."""

    def __init__(self, field: Optional[str], message: str) -> None:
        super().__init__(message)
        self.field = field


class NotFound(RecordStoreError):
    """No record with this id."""

    def __init__(self, record_id) -> None:
        super().__init__(f"Record {record_id} not found")
        self.record_id = record_id


class InvalidAdjustment(RecordStoreError):
    """Stock adjustment would take quantity below zero."""

    def __init__(self, record_id: int, quantity: int, delta: int) -> None:
        super().__init__(
            f"Record {record_id}: cannot adjust quantity {quantity} by {delta}"
        )
        self.record_id = record_id
        self.quantity = quantity
        self.delta = delta


class StoreUnavailable(RecordStoreError):
    """Persistence backend failed; the operation had no effect."""


class SessionClosed(RecordStoreError):
    """Editor session already committed or discarded."""


class UnsavedChanges(RecordStoreError):
    """Discard of a dirty editor session without confirmation."""
