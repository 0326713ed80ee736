"""
Utility modules for causeway.
"""

from .indent import Indented, indent

__all__ = ["Indented", "indent"]
