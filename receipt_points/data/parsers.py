"""
Receipt payload parsers for converting submitted JSON into canonical objects.

Parsing here is structural only: a field that is missing or null decodes to
empty text and is left for the validator to reject, while a field of the
wrong JSON type makes the whole payload malformed.
"""

import json
from typing import Any, Union

from ..errors import MalformedInputError
from .models import Item, Receipt

RECEIPT_TEXT_FIELDS = {
    "retailer": "retailer",
    "purchaseDate": "purchase_date",
    "purchaseTime": "purchase_time",
    "total": "total",
}

ITEM_TEXT_FIELDS = {
    "shortDescription": "short_description",
    "price": "price",
}

Payload = Union[str, bytes, bytearray, dict[str, Any]]


def decode_json_body(body: Union[str, bytes, bytearray]) -> Any:
    """
    Decode a raw request body into JSON data.

    Args:
        body: Raw body as text or UTF-8 bytes

    Returns:
        Decoded JSON value

    Raises:
        MalformedInputError: If the body is empty, not UTF-8 or not JSON
    """
    if isinstance(body, (bytes, bytearray)):
        try:
            body = bytes(body).decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedInputError(
                f"Body is not valid UTF-8: {e}",
                expected_format="utf-8 JSON"
            ) from e

    if not body.strip():
        raise MalformedInputError("Request body is empty", expected_format="JSON object")

    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise MalformedInputError(
            f"Invalid JSON: {e.msg} at line {e.lineno} column {e.colno}",
            raw_data=body[:200],
            expected_format="JSON object"
        ) from e
    except RecursionError as e:
        raise MalformedInputError(
            "Invalid JSON: nesting too deep",
            raw_data=body[:200],
            expected_format="JSON object"
        ) from e


def _text_field(data: dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MalformedInputError(
            f"Field {where}{key} must be a string, got {type(value).__name__}",
            expected_format="string",
            context={"field": f"{where}{key}"}
        )
    return value


def parse_item(data: Any, index: int) -> Item:
    """Parse one entry of the ``items`` array."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MalformedInputError(
            f"items[{index}] must be an object, got {type(data).__name__}",
            expected_format="JSON object",
            context={"item_index": index}
        )

    where = f"items[{index}]."
    values = {
        attr: _text_field(data, key, where)
        for key, attr in ITEM_TEXT_FIELDS.items()
    }
    return Item(**values)


def parse_receipt(payload: Payload) -> Receipt:
    """
    Parse a submitted receipt into a canonical Receipt.

    Args:
        payload: Raw JSON body or an already decoded JSON object

    Returns:
        Immutable Receipt

    Raises:
        MalformedInputError: If the payload does not have the receipt structure
    """
    if isinstance(payload, (str, bytes, bytearray)):
        data = decode_json_body(payload)
    else:
        data = payload

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MalformedInputError(
            f"Receipt must be a JSON object, got {type(data).__name__}",
            expected_format="JSON object"
        )

    values = {
        attr: _text_field(data, key, "")
        for key, attr in RECEIPT_TEXT_FIELDS.items()
    }

    raw_items = data.get("items")
    if raw_items is None:
        raw_items = []
    if not isinstance(raw_items, list):
        raise MalformedInputError(
            f"Field items must be an array, got {type(raw_items).__name__}",
            expected_format="JSON array",
            context={"field": "items"}
        )

    items = tuple(parse_item(raw, index) for index, raw in enumerate(raw_items))
    return Receipt(items=items, **values)
