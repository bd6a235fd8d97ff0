"""
Error classification for receipt submission and retrieval.

Client errors describe a bad request that the caller can correct; system
failures describe problems inside the service itself.
"""

from .client import (
    ClientError,
    MalformedInputError,
    InvalidReceiptError,
    ReceiptNotFoundError,
)
from .system_failures import (
    SystemFailureError,
    EncodingFailureError,
    ConfigurationError,
)

__all__ = [
    # Client Errors
    "ClientError",
    "MalformedInputError",
    "InvalidReceiptError",
    "ReceiptNotFoundError",
    # System Failures
    "SystemFailureError",
    "EncodingFailureError",
    "ConfigurationError",
]
