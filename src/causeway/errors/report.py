"""
Error values and the report container handed to the renderer.
"""

import traceback
from typing import Optional, Union

from ..config import get_settings
from .chain import Chain, ErrorSource


class MessageError(ErrorSource):
    """Leaf error carrying only a message"""

    def __init__(self, message: str):
        self._message = message

    def message(self) -> str:
        return self._message

    def source(self) -> Optional[ErrorSource]:
        return None

    def __repr__(self) -> str:
        return f"MessageError({self._message!r})"


class ContextError(ErrorSource):
    """Error adding a higher-level message on top of another error"""

    def __init__(self, message: str, source: ErrorSource):
        self._message = message
        self._source = source

    def message(self) -> str:
        return self._message

    def source(self) -> Optional[ErrorSource]:
        return self._source

    def __repr__(self) -> str:
        # Names the source type only; chains may be cyclic or very deep
        return f"ContextError(message={self._message!r}, source=<{type(self._source).__name__}>)"


class ExceptionSource(ErrorSource):
    """
    Adapter exposing a Python exception as an error value.

    The source follows ``__cause__`` (``raise ... from ...``) and falls back to
    ``__context__`` unless the context was suppressed with ``from None``.
    """

    def __init__(self, exception: BaseException):
        self.exception = exception

    def message(self) -> str:
        return str(self.exception)

    def source(self) -> Optional[ErrorSource]:
        exc = self.exception
        if exc.__cause__ is not None:
            return ExceptionSource(exc.__cause__)
        if exc.__context__ is not None and not exc.__suppress_context__:
            return ExceptionSource(exc.__context__)
        return None

    def __repr__(self) -> str:
        return repr(self.exception)


ErrorLike = Union[ErrorSource, BaseException, "Report"]


def as_error_source(value: ErrorLike) -> ErrorSource:
    """
    Convert an error-like value into an ErrorSource.

    Args:
        value: ErrorSource, Report, or exception

    Returns:
        ErrorSource for the value

    Raises:
        TypeError: If the value is not error-like
    """
    if isinstance(value, ErrorSource):
        return value
    if isinstance(value, Report):
        return value.error()
    if isinstance(value, BaseException):
        return ExceptionSource(value)
    raise TypeError(f"Cannot build an error report from {type(value).__name__}")


def _resolve_capture(capture_trace: Optional[bool]) -> bool:
    if capture_trace is None:
        return get_settings().capture_trace
    return capture_trace


def _format_trace(text: str) -> Optional[str]:
    text = text.rstrip("\n")
    return text or None


class Report:
    """
    Handle owning one root error and an optional captured trace.

    ``str(report)`` gives the root message only; ``report.debug()`` gives the
    message, the enumerated cause chain and the trace.
    """

    def __init__(self, error: ErrorLike, trace: Optional[str] = None):
        if isinstance(error, Report):
            trace = trace if trace is not None else error.trace()
        self._error = as_error_source(error)
        self._trace = trace

    @classmethod
    def msg(
        cls,
        message: str,
        capture_trace: Optional[bool] = None,
        skip_frames: int = 0
    ) -> "Report":
        """
        Create a report from a plain message.

        Args:
            message: Error message
            capture_trace: Capture the current stack (defaults to configuration)
            skip_frames: Extra innermost frames to leave out of the trace

        Returns:
            New Report
        """
        trace = None
        if _resolve_capture(capture_trace):
            # Drop the frame of this method plus any helper frames above it
            frames = traceback.format_stack()
            trace = _format_trace("".join(frames[:len(frames) - 1 - skip_frames]))
        return cls(MessageError(message), trace=trace)

    @classmethod
    def from_exception(
        cls,
        exception: BaseException,
        capture_trace: Optional[bool] = None
    ) -> "Report":
        """
        Create a report over an exception and its chained causes.

        Args:
            exception: Exception to report
            capture_trace: Keep the exception's traceback (defaults to configuration)

        Returns:
            New Report
        """
        trace = None
        if _resolve_capture(capture_trace) and exception.__traceback__ is not None:
            trace = _format_trace("".join(traceback.format_tb(exception.__traceback__)))
        return cls(ExceptionSource(exception), trace=trace)

    def wrap_err(self, message: str) -> "Report":
        """
        Wrap this report's error with a higher-level message.

        Args:
            message: Message for the new root error

        Returns:
            New Report keeping this report's trace
        """
        return Report(ContextError(message, self._error), trace=self._trace)

    def error(self) -> ErrorSource:
        """Root error value"""
        return self._error

    def message(self) -> str:
        return self._error.message()

    def source(self) -> Optional[ErrorSource]:
        return self._error.source()

    def trace(self) -> Optional[str]:
        return self._trace

    def chain(self) -> Chain:
        """Chain starting at the root error"""
        return Chain(self._error)

    def root_cause(self) -> ErrorSource:
        """Last error in the chain"""
        return self.chain().last() or self._error

    def debug(self, alternate: bool = False) -> str:
        """Debug rendering of this report"""
        from .formatter import to_debug_string
        return to_debug_string(self, alternate=alternate)

    def __str__(self) -> str:
        return self._error.message()

    def __repr__(self) -> str:
        return f"Report({self._error.message()!r})"


def report(message: str, capture_trace: Optional[bool] = None) -> Report:
    """
    Convenience function to create a report from a message.

    Args:
        message: Error message
        capture_trace: Capture the current stack (defaults to configuration)

    Returns:
        New Report
    """
    return Report.msg(message, capture_trace=capture_trace, skip_frames=1)
