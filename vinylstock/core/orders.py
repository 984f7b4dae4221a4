"""Compose a re-order request to a record's supplier (no sending)."""
from dataclasses import dataclass
from typing import Mapping
from urllib.parse import quote

from vinylstock.config import ORDER_COPIES, SHOP_SIGNATURE


@dataclass(frozen=True)
class OrderRequest:
    to: str
    subject: str
    body: str

    def mailto_uri(self) -> str:
        """mailto: link with subject and body, for the UI's mail client."""
        return "mailto:{}?subject={}&body={}".format(
            quote(self.to, safe="@"),
            quote(self.subject),
            quote(self.body),
        )


def compose_order_request(
    values: Mapping[str, object],
    copies: int = ORDER_COPIES,
    signature: str = SHOP_SIGNATURE,
) -> OrderRequest:
    """Build the supplier e-mail from record values (a Record's fields() or editor form)."""
    album = str(values.get("album_name") or "").strip()
    band = str(values.get("band_name") or "").strip()
    supplier = str(values.get("supplier_name") or "").strip()
    to = str(values.get("supplier_email") or "").strip()
    body = "\n".join(
        [
            f"Dear {supplier},",
            f"I would like to order {copies} more copies of {album} by {band}.",
            "Regards,",
            signature,
        ]
    )
    return OrderRequest(to=to, subject=f"Order: {album} by {band}", body=body)
