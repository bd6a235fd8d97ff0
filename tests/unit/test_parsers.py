"""Unit tests for receipt payload parsing."""

import json

import pytest

from receipt_points.data.models import Item, Receipt
from receipt_points.data.parsers import decode_json_body, parse_receipt
from receipt_points.errors import MalformedInputError


class TestDecodeJsonBody:
    """Test suite for raw body decoding."""

    def test_decodes_text(self):
        assert decode_json_body('{"a": 1}') == {"a": 1}

    def test_decodes_utf8_bytes(self):
        assert decode_json_body('{"retailer": "Café"}'.encode("utf-8")) == {"retailer": "Café"}

    @pytest.mark.parametrize("body", ["", "   ", b"", b"\n"])
    def test_empty_body(self, body):
        with pytest.raises(MalformedInputError):
            decode_json_body(body)

    def test_truncated_json(self):
        body = '{"retailer": "Test Store", "purchaseDate": "2022-03-20", "items": ['

        with pytest.raises(MalformedInputError) as exc_info:
            decode_json_body(body)

        assert exc_info.value.expected_format == "JSON object"
        assert exc_info.value.raw_data == body

    def test_corrupt_encoding(self):
        with pytest.raises(MalformedInputError):
            decode_json_body(b'{"retailer": "\xff\xfe"}')

    def test_excessive_nesting_is_malformed(self):
        body = "[" * 1000000 + "]" * 1000000

        with pytest.raises(MalformedInputError) as exc_info:
            parse_receipt(body)

        assert "nesting too deep" in str(exc_info.value)
        assert len(exc_info.value.raw_data) == 200


class TestParseReceipt:
    """Test suite for parse_receipt."""

    def test_parses_decoded_object(self, target_receipt):
        receipt = parse_receipt(target_receipt)

        assert isinstance(receipt, Receipt)
        assert receipt.retailer == "Target"
        assert receipt.purchase_date == "2022-01-01"
        assert receipt.purchase_time == "13:01"
        assert receipt.total == "35.35"
        assert len(receipt.items) == 5
        assert receipt.items[0] == Item("Mountain Dew 12PK", "6.49")

    def test_preserves_description_whitespace(self, target_receipt):
        receipt = parse_receipt(target_receipt)
        assert receipt.items[4].short_description == "   Klarbrunn 12-PK 12 FL OZ  "

    def test_parses_json_text_and_bytes(self, corner_market_receipt):
        body = json.dumps(corner_market_receipt)

        assert parse_receipt(body) == parse_receipt(corner_market_receipt)
        assert parse_receipt(body.encode("utf-8")) == parse_receipt(corner_market_receipt)

    def test_round_trips_to_wire_format(self, corner_market_receipt):
        assert parse_receipt(corner_market_receipt).to_dict() == corner_market_receipt

    def test_missing_fields_decode_to_empty_text(self):
        receipt = parse_receipt({"items": [{"price": "1.00"}]})

        assert receipt.retailer == ""
        assert receipt.total == ""
        assert receipt.items[0].short_description == ""

    def test_null_fields_decode_to_empty_text(self):
        receipt = parse_receipt({"retailer": None, "items": None})

        assert receipt.retailer == ""
        assert receipt.items == ()

    def test_null_body_decodes_to_empty_receipt(self):
        receipt = parse_receipt("null")

        assert receipt == Receipt(retailer="", purchase_date="", purchase_time="", total="")

    def test_unknown_fields_are_ignored(self, corner_market_receipt):
        corner_market_receipt["cashier"] = "Sam"
        corner_market_receipt["items"][0]["sku"] = 12345

        assert parse_receipt(corner_market_receipt).retailer == "M&M Corner Market"

    def test_null_item_decodes_to_empty_item(self):
        receipt = parse_receipt({"items": [None]})
        assert receipt.items == (Item("", ""),)

    @pytest.mark.parametrize("payload", [
        {"total": 9.0},
        {"retailer": True},
        {"purchaseDate": ["2022-01-01"]},
        {"items": {"shortDescription": "Gum", "price": "1.00"}},
        {"items": "Gum"},
        {"items": ["Gum"]},
        {"items": [{"shortDescription": "Gum", "price": 1.0}]},
    ])
    def test_wrong_types_are_malformed(self, payload):
        with pytest.raises(MalformedInputError):
            parse_receipt(payload)

    @pytest.mark.parametrize("body", ["[]", '"receipt"', "42", "true"])
    def test_non_object_body_is_malformed(self, body):
        with pytest.raises(MalformedInputError):
            parse_receipt(body)

    def test_wrong_type_reports_field(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_receipt({"items": [{"shortDescription": "Gum", "price": 1.0}]})

        assert exc_info.value.context == {"field": "items[0].price"}
