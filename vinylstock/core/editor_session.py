"""Editor session: stage one record's form edits, then commit or discard."""
import enum
import logging
from typing import Any, Optional

from vinylstock.core.errors import NotFound, SessionClosed, UnsavedChanges, ValidationError
from vinylstock.core.orders import OrderRequest, compose_order_request
from vinylstock.core.record_store import RecordStore
from vinylstock.core.validation import validate_fields
from vinylstock.models.record import FIELDS

logger = logging.getLogger(__name__)


class SessionState(enum.Enum):
    NEW = "new"
    EDITING = "editing"
    DIRTY = "dirty"
    COMMITTED = "committed"
    DISCARDED = "discarded"


_TERMINAL = (SessionState.COMMITTED, SessionState.DISCARDED)


class EditorSession:
    """Short-lived unit of work for one record (or a new one when record_id is None).

    The session never prompts. The UI asks is_dirty() before leaving the
    editor and passes confirmed=True to discard() once the user agreed to
    throw the edits away.
    """

    def __init__(self, store: RecordStore, record_id: Optional[int] = None) -> None:
        self._store = store
        self._record_id = record_id
        self._staged: dict[str, Any] = {}
        if record_id is None:
            self._original: dict[str, Any] = {name: "" for name in FIELDS}
            self._state = SessionState.NEW
        else:
            self._original = store.get(record_id).fields()
            self._state = SessionState.EDITING

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def record_id(self) -> Optional[int]:
        return self._record_id

    @property
    def is_new(self) -> bool:
        return self._record_id is None

    def is_dirty(self) -> bool:
        return self._state is SessionState.DIRTY

    def _check_open(self) -> None:
        if self._state in _TERMINAL:
            raise SessionClosed(f"Editor session is {self._state.value}")

    def values(self) -> dict:
        """Form values: loaded record overlaid with staged edits."""
        return {**self._original, **self._staged}

    def stage(self, field: str, value: Any) -> None:
        """Record a pending value for one form field."""
        self._check_open()
        if field not in FIELDS:
            raise ValidationError(field, f"Unknown field: {field}")
        self._staged[field] = value
        self._state = SessionState.DIRTY

    def commit(self) -> int:
        """Validate the whole form and write it to the store; returns the record id.

        On ValidationError nothing reaches the store and the session stays
        open in its current state so the user can correct the form.
        """
        self._check_open()
        values = validate_fields(self.values())
        if self._record_id is None:
            self._record_id = self._store.create(values)
        else:
            self._store.update(self._record_id, values)
        self._original = values
        self._staged = {}
        self._state = SessionState.COMMITTED
        logger.debug("Editor session committed record %d", self._record_id)
        return self._record_id

    def discard(self, confirmed: bool = False) -> None:
        """Drop staged edits. A dirty session needs confirmed=True."""
        self._check_open()
        if self.is_dirty() and not confirmed:
            raise UnsavedChanges("Discard unsaved changes needs confirmation")
        self._staged = {}
        self._state = SessionState.DISCARDED

    def adjust_stock(self, delta: int) -> int:
        """Editor +/- buttons: change stock directly in the store."""
        self._check_open()
        if self._record_id is None:
            raise NotFound(None)
        quantity = self._store.adjust_quantity(self._record_id, delta)
        self._original["quantity"] = quantity
        # The store value wins over a quantity typed before the button press
        self._staged.pop("quantity", None)
        return quantity

    def delete(self) -> int:
        """Delete the backing record (caller has confirmed) and close the session."""
        self._check_open()
        rows = 0
        if self._record_id is not None:
            rows = self._store.delete(self._record_id)
            if rows == 0:
                logger.warning("Editor delete: record %d already gone", self._record_id)
        self._staged = {}
        self._state = SessionState.DISCARDED
        return rows

    def order_request(self) -> OrderRequest:
        """Supplier re-order message built from the current form values."""
        return compose_order_request(self.values())
