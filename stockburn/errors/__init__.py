"""
Error classification for the tick data pipeline.

Data quality errors describe bad input that the caller may skip or repair;
system failures describe broken calling contracts that must not be retried.
"""

from .data_quality import (
    DataQualityError,
    TemporalDataError,
    MissingDataError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    BatchContractError,
    StreamCountError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "TemporalDataError",
    "MissingDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "BatchContractError",
    "StreamCountError",
]
