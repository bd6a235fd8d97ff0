"""
Client error classifications for receipt submissions and lookups.

These exceptions describe requests that cannot be served as sent. Their
messages are meant for logs; a transport should answer with a generic body
and the ``status_code`` hint.
"""

from typing import Optional, Dict, Any


class ClientError(Exception):
    """Base class for errors caused by the request rather than the service."""

    status_code = 400

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MalformedInputError(ClientError):
    """Submission body could not be decoded into a receipt."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class InvalidReceiptError(ClientError):
    """Receipt decoded but failed a structural validation rule."""

    def __init__(self, message: str, field: Optional[str] = None,
                 rule: Optional[str] = None, item_index: Optional[int] = None,
                 **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.rule = rule
        self.item_index = item_index


class ReceiptNotFoundError(ClientError):
    """No score is stored under the requested identifier."""

    status_code = 404

    def __init__(self, message: str, receipt_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.receipt_id = receipt_id
