"""
Logging configuration for causeway.

Configures logging based on environment variables:
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL
- LOG_FORMAT: simple, detailed, json, report

Exceptions attached to log records are rendered as error reports (message,
cause chain, traceback) by the json and report formats.
"""

import os
import sys
import logging
import json
from datetime import datetime
from typing import Optional

from .errors.formatter import to_debug_string
from .errors.report import Report


def _render_exc_info(exc_info) -> str:
    exception = exc_info[1]
    if exception is None:
        return ""
    return to_debug_string(Report.from_exception(exception, capture_trace=True))


class ReportLogFormatter(logging.Formatter):
    """
    Formatter rendering exceptions as error reports instead of tracebacks.
    """

    def formatException(self, ei) -> str:
        return _render_exc_info(ei)


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs log records as JSON for easy parsing and analysis.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        # Add exception report if present
        if record.exc_info:
            log_data["exception"] = _render_exc_info(record.exc_info)

        # Add extra fields if present
        if hasattr(record, "extra_data"):
            log_data["extra"] = record.extra_data

        return json.dumps(log_data)


def configure_logging(
    level: Optional[str] = None,
    format_style: Optional[str] = None
) -> None:
    """
    Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to LOG_LEVEL env var or INFO.
        format_style: Format style (simple, detailed, json, report).
                     Defaults to LOG_FORMAT env var or simple.
    """
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_format = (format_style or os.getenv("LOG_FORMAT", "simple")).lower()

    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if log_level not in valid_levels:
        sys.stderr.write(f"Warning: Invalid LOG_LEVEL '{log_level}', defaulting to INFO\n")
        log_level = "INFO"

    numeric_level = getattr(logging, log_level)

    if log_format == "json":
        formatter = JSONFormatter()
    elif log_format == "detailed":
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    elif log_format == "report":
        formatter = ReportLogFormatter(
            fmt="%(levelname)s - %(name)s - %(message)s"
        )
    else:  # simple or default
        formatter = logging.Formatter(
            fmt="%(levelname)s - %(message)s"
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)

    root_logger.debug(f"Logging configured: level={log_level}, format={log_format}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
