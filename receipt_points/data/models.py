"""
Canonical data models for submitted receipts.

Receipts are immutable once decoded. Monetary amounts, dates and times are
kept as the submitted text so that scoring can apply its own, deliberately
permissive, parsing rules to them.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Item:
    """Single line entry on a receipt."""
    short_description: str     # May carry leading/trailing whitespace
    price: str                 # Decimal amount as text, e.g. "2.25"

    def to_dict(self) -> dict[str, Any]:
        """Wire representation with the JSON field names."""
        return {
            "shortDescription": self.short_description,
            "price": self.price,
        }


@dataclass(frozen=True)
class Receipt:
    """Submitted purchase record."""
    retailer: str
    purchase_date: str         # YYYY-MM-DD
    purchase_time: str         # HH:MM, 24-hour clock
    total: str                 # Decimal amount as text, e.g. "9.00"
    items: tuple[Item, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Wire representation with the JSON field names."""
        return {
            "retailer": self.retailer,
            "purchaseDate": self.purchase_date,
            "purchaseTime": self.purchase_time,
            "total": self.total,
            "items": [item.to_dict() for item in self.items],
        }
