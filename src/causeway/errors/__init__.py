"""
Error values, cause chains and report rendering for causeway.
"""

from .chain import Chain, ErrorSource
from .report import (
    ContextError,
    ExceptionSource,
    MessageError,
    Report,
    as_error_source,
    report,
)
from .formatter import ReportFormatter, to_debug_string, to_display_string

__all__ = [
    "Chain",
    "ErrorSource",
    "ContextError",
    "ExceptionSource",
    "MessageError",
    "Report",
    "as_error_source",
    "report",
    "ReportFormatter",
    "to_debug_string",
    "to_display_string",
]
