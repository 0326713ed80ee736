"""
Report rendering in display and debug modes.

Debug output looks like:

    write failed

    Caused by:
     0: disk full
     1: permission denied

    Stack backtrace:
       File "app.py", line 3, in <module>
"""

import io
from typing import Optional, TextIO

from ..utils.indent import Indented
from .chain import Chain
from .report import ErrorLike, Report

CAUSED_BY_HEADER = "\n\nCaused by:"
TRACE_HEADER = "\n\nStack backtrace:\n"
SINGLE_CAUSE_INDENT = "    "
TRACE_INDENT = "   "


def _as_report(value: ErrorLike) -> Report:
    if isinstance(value, Report):
        return value
    return Report(value)


class ReportFormatter:
    """
    Writes reports to any object with a ``write(str)`` method.
    """

    @staticmethod
    def write_display(report: Report, sink: TextIO) -> None:
        """
        Write the root message only.

        Args:
            report: Report to render
            sink: Output sink
        """
        sink.write(report.message())

    @staticmethod
    def write_debug(
        report: Report,
        sink: TextIO,
        alternate: bool = False,
        max_depth: Optional[int] = None
    ) -> None:
        """
        Write the root message, the enumerated cause chain and the trace.

        Args:
            report: Report to render
            sink: Output sink
            alternate: Write ``repr()`` of the root error instead
            max_depth: Maximum number of causes (defaults to configuration)
        """
        root = report.error()

        if alternate:
            sink.write(repr(root))
            return

        sink.write(root.message())

        causes = list(Chain.causes_of(root, max_depth=max_depth))
        if causes:
            sink.write(CAUSED_BY_HEADER)
            width = len(str(len(causes) - 1)) + 1

            for index, cause in enumerate(causes):
                sink.write("\n")
                if len(causes) > 1:
                    out = Indented.numbered(sink, index, width)
                else:
                    out = Indented(sink, SINGLE_CAUSE_INDENT)
                out.write(cause.message())

        trace = report.trace()
        if trace:
            sink.write(TRACE_HEADER)
            Indented(sink, TRACE_INDENT).write(trace)

    @staticmethod
    def format_display(report: Report) -> str:
        buffer = io.StringIO()
        ReportFormatter.write_display(report, buffer)
        return buffer.getvalue()

    @staticmethod
    def format_debug(report: Report, alternate: bool = False) -> str:
        buffer = io.StringIO()
        ReportFormatter.write_debug(report, buffer, alternate=alternate)
        return buffer.getvalue()


def to_display_string(report: ErrorLike) -> str:
    """
    Render a report (or any error-like value) in display mode.

    Args:
        report: Report, ErrorSource, or exception

    Returns:
        The root error message
    """
    return ReportFormatter.format_display(_as_report(report))


def to_debug_string(report: ErrorLike, alternate: bool = False) -> str:
    """
    Render a report (or any error-like value) in debug mode.

    Args:
        report: Report, ErrorSource, or exception
        alternate: Render ``repr()`` of the root error instead

    Returns:
        Multi-line report text
    """
    return ReportFormatter.format_debug(_as_report(report), alternate=alternate)
