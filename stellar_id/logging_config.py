"""
Structured logging configuration for stellar-id.

Provides JSON or text logs with trace_id support for correlating the log
lines of a single CLI invocation or batch run.

Environment Variables:
    STELLAR_ID_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    STELLAR_ID_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from stellar_id.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="batch-inputs.txt")
    logger.info("Generated batch", extra={"count": 10})
"""

import logging
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from .config import Settings

LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures all logs have a trace_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True


def build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    return logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logger with structured logging.

    Logs go to stderr so CLI output on stdout stays machine-readable.

    Args:
        settings: Explicit settings; read from the environment when omitted
    """
    settings = settings or Settings.from_env()
    level = LEVEL_MAP.get(settings.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    # Handler-level filter so records propagated from child loggers get trace_id too
    handler.addFilter(TraceIDFilter())
    handler.setFormatter(build_formatter(settings.log_format))
    root_logger.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically the input source)

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})
