"""Field validation shared by the record store and editor sessions."""
import re
from typing import Any, Mapping

from vinylstock.core.errors import ValidationError
from vinylstock.models.record import FIELDS, NUMERIC_FIELDS, TEXT_FIELDS

_LABELS = {
    "album_name": "Album name",
    "band_name": "Band name",
    "quantity": "Quantity",
    "price": "Price",
    "cover_image_path": "Cover image",
    "supplier_name": "Supplier name",
    "supplier_email": "Supplier email",
}

_COUNT_RE = re.compile(r"^[+-]?[0-9]+\Z")


def _text(field: str, value: Any) -> str:
    if value is None:
        value = ""
    if not isinstance(value, str):
        raise ValidationError(field, f"{_LABELS[field]} must be text")
    value = value.strip()
    if not value:
        raise ValidationError(field, f"{_LABELS[field]} is required")
    return value


def parse_count(field: str, value: Any) -> int:
    """Blank -> 0; digits -> int; anything else (incl. negatives) is rejected."""
    if value is None:
        return 0
    # bool is an int subclass; a checkbox value is not a count
    if isinstance(value, bool):
        raise ValidationError(field, f"{_LABELS[field]} must be a whole number")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
        # Plain decimal digits only; int() would also take "1_000"
        if not _COUNT_RE.match(value):
            raise ValidationError(field, f"{_LABELS[field]} must be a whole number")
        number = int(value)
    else:
        raise ValidationError(field, f"{_LABELS[field]} must be a whole number")
    if number < 0:
        raise ValidationError(field, f"{_LABELS[field]} cannot be negative")
    return number


def validate_fields(fields: Mapping[str, Any]) -> dict:
    """Return normalized values for a full record form.

    Every field is always validated together; a key that is absent counts as
    blank. Raises ValidationError on the first offending field, in form order.
    """
    unknown = sorted(set(fields) - set(FIELDS))
    if unknown:
        raise ValidationError(unknown[0], f"Unknown field: {unknown[0]}")
    out = {}
    for name in FIELDS:
        value = fields.get(name)
        if name in NUMERIC_FIELDS:
            out[name] = parse_count(name, value)
        elif name in TEXT_FIELDS:
            out[name] = _text(name, value)
    return out
