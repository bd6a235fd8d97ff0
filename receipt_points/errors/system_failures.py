"""
System failure error classifications for unrecoverable errors.

These exceptions represent failures inside the service that the caller
cannot fix by changing the request.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    status_code = 500

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class EncodingFailureError(SystemFailureError):
    """A computed response could not be serialized."""

    def __init__(self, message: str, payload_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class ConfigurationError(SystemFailureError):
    """Merged configuration failed validation at startup."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
