"""Record inventory CRUD, stock adjustment, and supplier re-order endpoints."""
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, StrictInt

from vinylstock.api.state import AppState, get_state
from vinylstock.core.orders import compose_order_request
from vinylstock.core.record_store import insert_sample_record
from vinylstock.models.record import Record, RecordSummary

router = APIRouter()


class RecordBody(BaseModel):
    """Full editor form. Counts may arrive as typed ints or raw form text."""
    album_name: Optional[str] = None
    band_name: Optional[str] = None
    quantity: Union[StrictInt, str, None] = None
    price: Union[StrictInt, str, None] = None
    cover_image_path: Optional[str] = None
    supplier_name: Optional[str] = None
    supplier_email: Optional[str] = None


class AdjustBody(BaseModel):
    delta: StrictInt


def _summary_to_dict(s: RecordSummary) -> dict:
    return {
        "record_id": s.record_id,
        "album_name": s.album_name,
        "band_name": s.band_name,
        "quantity": s.quantity,
        "price": s.price,
    }


def _record_to_dict(r: Record) -> dict:
    return {"record_id": r.record_id, **r.fields()}


@router.get("/")
def list_records(state: AppState = Depends(get_state)):
    """Catalog list in insertion order."""
    return [_summary_to_dict(s) for s in state.store.list_records()]


@router.post("/", status_code=201)
def create_record(body: RecordBody, state: AppState = Depends(get_state)):
    """Create a record from the editor form."""
    record_id = state.store.create(body.model_dump())
    return _record_to_dict(state.store.get(record_id))


@router.post("/sample", status_code=201)
def create_sample_record(state: AppState = Depends(get_state)):
    """Insert the demo record (catalog "insert dummy data")."""
    record_id = insert_sample_record(state.store)
    return _record_to_dict(state.store.get(record_id))


@router.delete("/")
def delete_all_records(state: AppState = Depends(get_state)):
    """Delete every record; returns the number removed."""
    return {"deleted": state.store.delete_all()}


@router.get("/{record_id}")
def get_record(record_id: int, state: AppState = Depends(get_state)):
    return _record_to_dict(state.store.get(record_id))


@router.put("/{record_id}")
def update_record(record_id: int, body: RecordBody, state: AppState = Depends(get_state)):
    """Replace all fields of a record from the editor form."""
    state.store.update(record_id, body.model_dump())
    return _record_to_dict(state.store.get(record_id))


@router.post("/{record_id}/quantity")
def adjust_quantity(record_id: int, body: AdjustBody, state: AppState = Depends(get_state)):
    """Editor +/- stock buttons."""
    quantity = state.store.adjust_quantity(record_id, body.delta)
    return {"record_id": record_id, "quantity": quantity}


@router.post("/{record_id}/sale")
def sell_one(record_id: int, state: AppState = Depends(get_state)):
    """List-item sale button: one copy sold."""
    quantity = state.store.sell_one(record_id)
    return {"record_id": record_id, "quantity": quantity}


@router.delete("/{record_id}", status_code=204)
def delete_record(record_id: int, state: AppState = Depends(get_state)):
    """Delete one record."""
    if state.store.delete(record_id) == 0:
        raise HTTPException(status_code=404, detail="Record not found")


@router.get("/{record_id}/order")
def order_request(record_id: int, state: AppState = Depends(get_state)):
    """Supplier re-order e-mail for a record (composed, not sent)."""
    order = compose_order_request(state.store.get(record_id).fields())
    return {
        "to": order.to,
        "subject": order.subject,
        "body": order.body,
        "mailto": order.mailto_uri(),
    }
