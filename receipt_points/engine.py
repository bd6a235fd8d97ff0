"""
Main receipt processing coordinator.

Orchestrates the submission pipeline (parse, validate, score, store) and the
lookup of stored scores. The transport-neutral ``submit``/``retrieve`` pair
returns the JSON bodies a transport layer should send.
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import Receipt
from .data.parsers import Payload, parse_receipt
from .data.validators import ReceiptValidator
from .errors import (
    ConfigurationError,
    EncodingFailureError,
    InvalidReceiptError,
    MalformedInputError,
    ReceiptNotFoundError,
)
from .models.score import ScoreBreakdown
from .persistence.score_store import ScoreStore
from .scoring.calculator import PointsCalculator

logger = structlog.get_logger(__name__)


def load_config(
    config_dir: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None
) -> DefaultConfig:
    """
    Load, validate and type the merged configuration.

    Raises:
        ConfigurationError: If any merged value fails validation
    """
    loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
    merged = loader.merge_config(overrides)

    errors = ConfigValidator.validate_config(merged)
    if errors:
        raise ConfigurationError(
            "Invalid configuration: " + "; ".join(
                f"{err.field}: {err.message} (got: {err.value})" for err in errors
            ),
            errors=errors
        )

    return loader.build_config(overrides)


def encode_response(body: dict[str, Any]) -> str:
    """
    Serialize a response body to JSON text.

    Raises:
        EncodingFailureError: If the body is not JSON serializable
    """
    try:
        return json.dumps(body, allow_nan=False)
    except (TypeError, ValueError) as e:
        logger.error(
            "Response encoding failed",
            error=str(e),
            payload_type=type(body).__name__
        )
        raise EncodingFailureError(
            f"Could not encode response: {e}",
            payload_type=type(body).__name__
        ) from e


class ReceiptProcessingEngine:
    """
    Main coordinator for receipt scoring.

    Manages the pipeline:
    Payload → Receipt → Validation → Points → Score Store

    The store is the only shared state. Pass one store to several engines
    (or share one engine across threads) to serve lookups for every
    submission.
    """

    def __init__(
        self,
        store: Optional[ScoreStore] = None,
        config_dir: Optional[Union[str, Path]] = None,
        config_overrides: Optional[dict[str, Any]] = None,
        config: Optional[DefaultConfig] = None
    ) -> None:
        """Initialize the receipt processing engine."""
        self.logger = logger

        self.config = config or load_config(config_dir, config_overrides)
        self.store = store if store is not None else ScoreStore()
        self.validator = ReceiptValidator()
        self.calculator = PointsCalculator(self.config.scoring)

        self.logger.info("Receipt processing engine initialized")

    def parse_and_validate(self, payload: Payload) -> Receipt:
        """
        Decode a submission and check it is scorable.

        Raises:
            MalformedInputError: If the payload is not a receipt structure
            InvalidReceiptError: If the receipt fails validation
        """
        try:
            receipt = parse_receipt(payload)
        except MalformedInputError as e:
            self.logger.warning(
                "Malformed receipt submission",
                error=str(e),
                context=e.context
            )
            raise

        try:
            self.validator.validate(receipt)
        except InvalidReceiptError as e:
            self.logger.warning(
                "Receipt validation failed",
                error=str(e),
                field=e.field,
                rule=e.rule,
                item_index=e.item_index
            )
            raise

        return receipt

    def process_receipt(self, payload: Payload) -> str:
        """
        Score a submitted receipt and store the result.

        Args:
            payload: Raw JSON body or decoded JSON object

        Returns:
            Identifier under which the points were stored
        """
        receipt = self.parse_and_validate(payload)
        points = self.calculator.score(receipt)
        receipt_id = self.store.put(points)

        self.logger.info(
            "Processed receipt",
            receipt_id=receipt_id,
            retailer=receipt.retailer,
            item_count=len(receipt.items),
            points=points
        )

        return receipt_id

    def explain_receipt(self, payload: Payload) -> ScoreBreakdown:
        """Score a submission rule by rule without storing it."""
        receipt = self.parse_and_validate(payload)
        return self.calculator.explain(receipt)

    def get_points(self, receipt_id: str) -> int:
        """
        Look up stored points.

        Raises:
            MalformedInputError: If the identifier is empty
            ReceiptNotFoundError: If nothing is stored under the identifier
        """
        if not receipt_id:
            self.logger.warning("Points lookup without a receipt id")
            raise MalformedInputError("Missing receipt id")

        try:
            return self.store.get(receipt_id)
        except ReceiptNotFoundError:
            self.logger.info("Receipt id not found", receipt_id=receipt_id)
            raise

    def submit(self, payload: Payload) -> dict[str, str]:
        """Process a submission and return the ``{"id": ...}`` body."""
        return {"id": self.process_receipt(payload)}

    def retrieve(self, receipt_id: str) -> dict[str, int]:
        """Look up a receipt and return the ``{"points": ...}`` body."""
        return {"points": self.get_points(receipt_id)}
