"""
Centralized logging configuration for the stockburn pipeline.

Library code never configures logging itself; it obtains loggers through
get_logger and emits key-value events. An application (a training script,
a tick conversion tool) calls configure_logging once at startup. Because
pipeline tools may write tick CSV to stdout, log output defaults to stderr.
"""
import logging
import sys
from typing import Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger, Processor

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _base_processors(include_timestamp: bool, include_caller: bool) -> list[Processor]:
    """Processors shared by console and JSON output, renderer excluded."""
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    # File and line of the emitting call, for tracing dropped rows to the reader
    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    return processors


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list[Processor]] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog for the pipeline.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, emit one JSON object per event; otherwise
            uncolored key=value console lines
        include_timestamp: Add a UTC ISO-8601 timestamp to every event
        include_caller: Add the emitting file name and line number
        extra_processors: Processors run after the built-in ones and before rendering
        stream: Destination for log lines (defaults to stderr)

    Raises:
        ValueError: If the level name is unknown
    """
    level_name = level.upper()
    if level_name not in _LEVELS:
        raise ValueError(f"Unknown log level {level!r}, expected one of {', '.join(_LEVELS)}")

    logging.basicConfig(
        level=getattr(logging, level_name),
        stream=stream or sys.stderr,
        format="%(message)s"  # structlog renders the whole line
    )

    processors = _base_processors(include_timestamp, include_caller)
    if extra_processors:
        processors.extend(extra_processors)

    # Log files are often piped or tailed, so the console renderer never colors
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a structlog logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Lazily configured structlog logger instance
    """
    return structlog.get_logger(name)


def log_row_issue(
    logger: FilteringBoundLogger,
    issue: str,
    action: str,
    rows: int,
    sample: Optional[str] = None,
) -> None:
    """
    Log malformed input rows with a standardized format.

    Args:
        logger: Structlog logger instance
        issue: What is wrong with the rows ("extra_cells", "unparseable_timestamp")
        action: What the reader did with them ("truncated", "dropped")
        rows: Number of affected rows
        sample: Raw text of the first affected row or cell
    """
    bound_logger = logger.bind(issue=issue, action=action, rows=rows)

    if sample is not None:
        bound_logger = bound_logger.bind(sample=sample)

    bound_logger.warning("Malformed tick rows")
