"""
Logging configuration and utilities for the stockburn pipeline.
"""
from .config import configure_logging, get_logger, log_row_issue

__all__ = ["configure_logging", "get_logger", "log_row_issue"]
