"""
Data quality error classifications for tick data processing.

These exceptions categorize problems with the tick data itself. Individual
malformed cells never raise; they degrade to NaN in the reader. These errors
cover the cases where a whole input or a tick ordering is unusable.
"""

from datetime import datetime
from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class TemporalDataError(DataQualityError):
    """Timestamp or sequencing issues in tick data."""

    def __init__(self, message: str, timestamp: Optional[datetime] = None,
                 expected_timestamp: Optional[datetime] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.timestamp = timestamp
        self.expected_timestamp = expected_timestamp


class MissingDataError(DataQualityError):
    """Required data is completely missing."""

    def __init__(self, message: str, data_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type


class MalformedDataError(DataQualityError):
    """Data exists but is in incorrect format."""

    def __init__(self, message: str, missing_columns: Optional[list] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.missing_columns = missing_columns or []
        self.expected_format = expected_format
