"""Data models for inventory records."""
from vinylstock.models.record import ChangeEvent, Record, RecordSummary

__all__ = [
    "ChangeEvent",
    "Record",
    "RecordSummary",
]
