"""
Cause chain traversal.

An error value exposes ``message()`` and ``source()``; following ``source()``
until it returns None yields the cause chain. Chains are walked lazily and
re-derived on every iteration.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from ..config import get_settings

logger = logging.getLogger(__name__)


class ErrorSource(ABC):
    """
    Capability surface the renderer depends on.

    Every error variant implements ``message`` and ``source``; the renderer
    never looks at concrete error types.
    """

    @abstractmethod
    def message(self) -> str:
        """Human-readable message for this error alone"""

    @abstractmethod
    def source(self) -> Optional["ErrorSource"]:
        """The error that caused this one, if any"""


class Chain:
    """
    Iterable over an error and everything reachable through ``source()``.

    Iteration stops at the first missing source, or after ``max_depth``
    links so that a cyclic chain cannot loop forever.
    """

    def __init__(self, head: Optional[ErrorSource], max_depth: Optional[int] = None):
        """
        Args:
            head: First error yielded (None gives an empty chain)
            max_depth: Maximum links yielded (defaults to configured depth)
        """
        self._head = head
        self._max_depth = max_depth if max_depth is not None else get_settings().max_chain_depth

    @classmethod
    def causes_of(cls, root: ErrorSource, max_depth: Optional[int] = None) -> "Chain":
        """
        Chain of the causes of ``root``, excluding ``root`` itself.

        Args:
            root: Top-level error
            max_depth: Maximum links yielded

        Returns:
            Chain starting at the root's direct cause
        """
        return cls(root.source(), max_depth=max_depth)

    def __iter__(self) -> Iterator[ErrorSource]:
        current = self._head
        depth = 0

        while current is not None:
            if depth >= self._max_depth:
                logger.warning(
                    f"Cause chain truncated after {self._max_depth} links, "
                    f"the chain may be cyclic"
                )
                return

            yield current
            depth += 1
            current = current.source()

    def __bool__(self) -> bool:
        return self._head is not None and self._max_depth > 0

    def last(self) -> Optional[ErrorSource]:
        """Final error reached by the walk (the root cause)"""
        last = None
        for error in self:
            last = error
        return last
