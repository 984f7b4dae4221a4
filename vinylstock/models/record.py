"""Inventory record, list summary, and change events."""
from dataclasses import dataclass
from typing import Optional

# Column order used by the editor form and the JSON file.
TEXT_FIELDS = (
    "album_name",
    "band_name",
    "cover_image_path",
    "supplier_name",
    "supplier_email",
)
NUMERIC_FIELDS = ("quantity", "price")
FIELDS = (
    "album_name",
    "band_name",
    "quantity",
    "price",
    "cover_image_path",
    "supplier_name",
    "supplier_email",
)


@dataclass(frozen=True)
class Record:
    """One album in stock, with its supplier details."""
    record_id: int
    album_name: str
    band_name: str
    quantity: int
    price: int
    cover_image_path: str
    supplier_name: str
    supplier_email: str

    def fields(self) -> dict:
        """Mutable fields only (everything but record_id)."""
        return {name: getattr(self, name) for name in FIELDS}

    def summary(self) -> "RecordSummary":
        return RecordSummary(
            record_id=self.record_id,
            album_name=self.album_name,
            band_name=self.band_name,
            quantity=self.quantity,
            price=self.price,
        )


@dataclass(frozen=True)
class RecordSummary:
    """Catalog list row."""
    record_id: int
    album_name: str
    band_name: str
    quantity: int
    price: int


@dataclass(frozen=True)
class ChangeEvent:
    """Published after each committed store mutation."""
    kind: str  # "created" | "updated" | "quantity" | "deleted" | "cleared"
    record_id: Optional[int]
    rows: int = 1
