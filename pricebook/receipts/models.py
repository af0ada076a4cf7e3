"""Data models for parsed receipts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ParsedReceiptItem:
    """A single purchased line item extracted from a receipt."""

    name: str
    price: float = 0.0
    quantity: int | float = 1
    alternative_name: str | None = None
    weight: str | None = None  # e.g. "907g", "1kg"
    unit_price: float | None = None  # price per 100g / 100ml
    category: str | None = None  # Produce, Dairy, Pantry, etc.
    original_price: float | None = None  # pre-discount price
    tags: list[str] = field(default_factory=list)  # SALE, CLEARANCE, TAXABLE
    image_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase wire shape, omitting unset optional fields."""
        data: dict[str, Any] = {
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
        }
        optional = {
            "alternativeName": self.alternative_name,
            "weight": self.weight,
            "unitPrice": self.unit_price,
            "category": self.category,
            "originalPrice": self.original_price,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        data["tags"] = list(self.tags)
        if self.image_url is not None:
            data["imageUrl"] = self.image_url
        return data


@dataclass
class ParsedReceipt:
    """Structured result of parsing one receipt image."""

    store: str | None = None
    store_location: str | None = None
    date: str | None = None  # YYYY-MM-DD
    time: str | None = None  # HH:MM
    total: float | None = None
    currency: str = "USD"
    items: list[ParsedReceiptItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "store": self.store,
            "storeLocation": self.store_location,
            "date": self.date,
            "time": self.time,
            "total": self.total,
            "currency": self.currency,
            "items": [item.to_dict() for item in self.items],
        }
