"""JSON isolation and line item normalization."""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any

from .errors import MalformedResponse
from .models import ParsedReceipt, ParsedReceiptItem

logger = logging.getLogger(__name__)

UNKNOWN_ITEM_NAME = "Unknown Item"

_SALE_MARKER = re.compile(r"\(SALE\)", re.IGNORECASE)


def isolate_json(text: str) -> str:
    """Return the slice from the first ``{`` to the last ``}`` inclusive.

    Models wrap the object in prose, code fences or thought blocks even
    when told not to.

    Raises:
        MalformedResponse: If no brace pair is found.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end <= start:
        logger.error("No JSON object found in response: %s", text)
        raise MalformedResponse("Gemini response did not contain valid JSON data")
    return text[start : end + 1]


def parse_json_object(text: str) -> dict[str, Any]:
    """Isolate and parse the JSON object embedded in ``text``."""
    candidate = isolate_json(text)
    try:
        payload = json.loads(candidate)
    except (ValueError, RecursionError) as e:
        raise MalformedResponse(f"Gemini response JSON could not be parsed: {e}") from e
    if not isinstance(payload, dict):
        raise MalformedResponse("Gemini response JSON is not an object")
    return payload


def to_number(value: Any) -> float:
    """Coerce a loosely typed value to float, NaN when it is not numeric.

    Blank strings and booleans coerce the way JSON producers expect
    (``""`` → 0, ``True`` → 1). Integers too large for a float become
    infinite. Digit separators (``"1_000"``) are not numeric.
    """
    if value is None:
        return math.nan
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return 0.0
        if "_" in stripped:
            return math.nan
        try:
            return float(stripped)
        except ValueError:
            return math.nan
    return math.nan


def _clean_name(value: Any, placeholder: str) -> str:
    name = "" if value is None or value is False else str(value)
    name = _SALE_MARKER.sub("", name.strip()).strip()
    return name or placeholder


def _clean_price(value: Any) -> float:
    price = to_number(value)
    if math.isfinite(price) and price > 0:
        return price
    return 0.0


def _clean_quantity(value: Any) -> int | float:
    quantity = to_number(value)
    if not math.isfinite(quantity) or quantity == 0:
        return 1
    return int(quantity) if quantity.is_integer() else quantity


def _clean_original_price(value: Any) -> float | None:
    if value is None:
        return None
    price = to_number(value)
    if math.isfinite(price) and price > 0:
        return price
    return None


def _clean_tags(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, (list, tuple)):
        return [str(tag) for tag in value]
    return []


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def normalize_item(
    raw: Any, unknown_item_name: str = UNKNOWN_ITEM_NAME
) -> ParsedReceiptItem:
    """Build a ParsedReceiptItem from one raw item, never raising."""
    if not isinstance(raw, dict):
        logger.debug("Replacing non-object line item: %r", raw)
        raw = {}

    return ParsedReceiptItem(
        name=_clean_name(raw.get("name"), unknown_item_name),
        alternative_name=_optional_text(raw.get("alternativeName")),
        price=_clean_price(raw.get("price")),
        quantity=_clean_quantity(raw.get("quantity")),
        weight=raw.get("weight"),
        unit_price=raw.get("unitPrice"),
        category=raw.get("category"),
        original_price=_clean_original_price(raw.get("originalPrice")),
        tags=_clean_tags(raw.get("tags")),
        image_url=raw.get("imageUrl"),
    )


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def build_receipt(
    payload: dict[str, Any],
    default_currency: str = "USD",
    unknown_item_name: str = UNKNOWN_ITEM_NAME,
) -> ParsedReceipt:
    """Convert a parsed JSON payload into a ParsedReceipt."""
    raw_items = payload.get("items")
    if not isinstance(raw_items, list):
        raw_items = []

    total = to_number(payload.get("total"))

    return ParsedReceipt(
        store=_optional_str(payload.get("store")),
        store_location=_optional_str(payload.get("storeLocation")),
        date=_optional_str(payload.get("date")),
        time=_optional_str(payload.get("time")),
        total=total if math.isfinite(total) else None,
        currency=_optional_text(payload.get("currency")) or default_currency,
        items=[normalize_item(item, unknown_item_name) for item in raw_items],
    )
