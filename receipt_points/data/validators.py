"""
Structural validation for decoded receipts.

Only presence is checked here. Amounts, dates and times are not required to
be well formed; the scorer handles unparseable values itself.
"""

from ..errors import InvalidReceiptError
from .models import Receipt

REQUIRED_TEXT_FIELDS = (
    ("retailer", "retailer"),
    ("purchaseDate", "purchase_date"),
    ("purchaseTime", "purchase_time"),
    ("total", "total"),
)


class ReceiptValidator:
    """Validates receipts for structural completeness."""

    def validate(self, receipt: Receipt) -> None:
        """
        Validate a receipt, stopping at the first violated rule.

        Args:
            receipt: Decoded receipt

        Raises:
            InvalidReceiptError: If any rule is violated
        """
        self._validate_required_fields(receipt)
        self._validate_items(receipt)

    def _validate_required_fields(self, receipt: Receipt) -> None:
        for name, attr in REQUIRED_TEXT_FIELDS:
            if not getattr(receipt, attr):
                raise InvalidReceiptError(
                    f"Missing required field: {name}",
                    field=name,
                    rule="required_field"
                )

    def _validate_items(self, receipt: Receipt) -> None:
        if not receipt.items:
            raise InvalidReceiptError(
                "Receipt must contain at least one item",
                field="items",
                rule="non_empty_items"
            )

        for index, item in enumerate(receipt.items):
            if not item.short_description:
                raise InvalidReceiptError(
                    f"Item {index} is missing a short description",
                    field="shortDescription",
                    rule="item_description_required",
                    item_index=index
                )
            if not item.price:
                raise InvalidReceiptError(
                    f"Item {index} is missing a price",
                    field="price",
                    rule="item_price_required",
                    item_index=index
                )


def validate_receipt(receipt: Receipt) -> None:
    """Validate a receipt with the default validator."""
    ReceiptValidator().validate(receipt)
