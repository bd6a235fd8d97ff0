"""In-memory score persistence keyed by generated receipt identifiers."""

import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import structlog

from ..errors import ReceiptNotFoundError


@dataclass(frozen=True)
class ScoreRecord:
    """Stored score with metadata."""
    receipt_id: str
    points: int
    created_at: str


class ScoreStore:
    """
    Thread-safe identifier -> points store.

    Records are created once and never updated or removed. Every identifier
    is a fresh UUID4 string, so identifiers are not reused for the life of
    the store.
    """

    def __init__(self):
        self.logger = structlog.get_logger("score.store")
        self._lock = threading.Lock()
        self._records: dict[str, ScoreRecord] = {}

    def _generate_receipt_id(self) -> str:
        """Generate a fresh opaque identifier."""
        return str(uuid.uuid4())

    def put(self, points: int) -> str:
        """
        Store points under a new identifier.

        Args:
            points: Non-negative score to store

        Returns:
            Identifier for later retrieval
        """
        record_time = datetime.now(timezone.utc).isoformat()

        with self._lock:
            receipt_id = self._generate_receipt_id()
            while receipt_id in self._records:
                receipt_id = self._generate_receipt_id()

            self._records[receipt_id] = ScoreRecord(
                receipt_id=receipt_id,
                points=points,
                created_at=record_time
            )

        self.logger.info("Score stored", receipt_id=receipt_id, points=points)
        return receipt_id

    def get(self, receipt_id: str) -> int:
        """
        Look up the points stored under an identifier.

        Raises:
            ReceiptNotFoundError: If no record exists for the identifier
        """
        return self.get_record(receipt_id).points

    def get_record(self, receipt_id: str) -> ScoreRecord:
        """Look up the full record stored under an identifier."""
        with self._lock:
            record = self._records.get(receipt_id)

        if record is None:
            raise ReceiptNotFoundError(
                f"No receipt found for id {receipt_id}",
                receipt_id=receipt_id
            )

        return record

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
