"""
System failure error classifications for unrecoverable errors.

These exceptions represent programming-contract violations at the batcher
boundary. They fail fast and are never retried.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class BatchContractError(SystemFailureError):
    """A batch input does not match the configured feature layout."""

    def __init__(self, message: str, expected: Optional[int] = None,
                 actual: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expected = expected
        self.actual = actual


class StreamCountError(BatchContractError):
    """Number of tick iterators differs from the configured stock count."""
