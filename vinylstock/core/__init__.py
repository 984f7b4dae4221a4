"""Core services: record store, editor sessions, supplier orders."""
from vinylstock.core.editor_session import EditorSession, SessionState
from vinylstock.core.record_store import RecordStore

__all__ = ["EditorSession", "RecordStore", "SessionState"]
