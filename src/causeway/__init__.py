"""
causeway - minimal error reports.

Renders an error, its enumerated cause chain and an optional captured trace
as readable multi-line text.
"""

from .errors import (
    Chain,
    ContextError,
    ErrorSource,
    ExceptionSource,
    MessageError,
    Report,
    ReportFormatter,
    as_error_source,
    report,
    to_debug_string,
    to_display_string,
)
from .config import Settings, get_settings

__version__ = "0.3.1"

__all__ = [
    "Chain",
    "ContextError",
    "ErrorSource",
    "ExceptionSource",
    "MessageError",
    "Report",
    "ReportFormatter",
    "as_error_source",
    "report",
    "to_debug_string",
    "to_display_string",
    "Settings",
    "get_settings",
]
