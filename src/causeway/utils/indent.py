"""
Line indentation for text written incrementally to a sink.

Wraps any object with a ``write(str)`` method and inserts indentation at the
start of every non-empty line passing through it. Two layouts are supported:

- uniform: every line gets the same prefix
- numbered: the first line gets a marker such as `` 0: `` and every later line
  gets spaces of the same width, so continuation lines align under the text
"""

import io
from typing import Optional, TextIO

DEFAULT_INDENTATION = "    "


class Indented:
    """
    Sink wrapper that indents every line written through it.

    Blank lines are passed through without indentation so the output never
    carries trailing whitespace.
    """

    def __init__(
        self,
        sink: TextIO,
        indentation: str = DEFAULT_INDENTATION,
        first_line: Optional[str] = None
    ):
        """
        Args:
            sink: Object with a ``write(str)`` method receiving the output
            indentation: Prefix for every line after the first
            first_line: Prefix for the first line (defaults to ``indentation``)
        """
        self._sink = sink
        self._indentation = indentation
        self._pending_prefix = indentation if first_line is None else first_line
        self._needs_indent = True

    @classmethod
    def numbered(cls, sink: TextIO, index: int, width: int) -> "Indented":
        """
        Build a wrapper whose first line is marked with ``index``.

        The index is right-aligned in ``width`` columns and followed by ``": "``;
        continuation lines are indented by the full marker width.

        Args:
            sink: Output sink
            index: Number shown on the first line
            width: Column width reserved for the number

        Returns:
            Indented wrapper
        """
        marker = f"{index:>{width}}: "
        return cls(sink, indentation=" " * len(marker), first_line=marker)

    def write(self, text: str) -> int:
        """Write ``text`` to the sink, indenting each non-empty line."""
        for position, line in enumerate(text.split("\n")):
            if position > 0:
                self._sink.write("\n")
                self._needs_indent = True

            if self._needs_indent:
                if not line:
                    continue
                self._sink.write(self._pending_prefix)
                self._pending_prefix = self._indentation
                self._needs_indent = False

            self._sink.write(line)

        return len(text)


def indent(
    text: str,
    indentation: str = DEFAULT_INDENTATION,
    first_line: Optional[str] = None
) -> str:
    """
    Convenience function returning ``text`` with every non-empty line indented.

    Args:
        text: Text to indent
        indentation: Prefix for every line after the first
        first_line: Prefix for the first line (defaults to ``indentation``)

    Returns:
        Indented text
    """
    buffer = io.StringIO()
    Indented(buffer, indentation=indentation, first_line=first_line).write(text)
    return buffer.getvalue()
