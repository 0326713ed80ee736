"""
Usage example for causeway.

Builds a two-level report and prints its debug rendering, the way an
application would report a fatal error on exit.
"""

import sys
from typing import Optional, TextIO

from dotenv import find_dotenv, load_dotenv

from .errors import Report, report, to_debug_string
from .logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_demo_report() -> Report:
    """Report from the usage example: one message wrapped with context"""
    error = report("oh no this program is just bad!")
    return error.wrap_err("usage example successfully experienced a failure")


def main(stream: Optional[TextIO] = None) -> int:
    """
    Run the usage example.

    Args:
        stream: Where the report is written (defaults to stderr)

    Returns:
        Process exit status
    """
    load_dotenv(find_dotenv(usecwd=True))
    configure_logging()

    out = stream or sys.stderr
    error = build_demo_report()
    logger.debug(f"Rendering report with {len(list(error.chain()))} errors in chain")

    out.write(f"Error: {to_debug_string(error)}\n")
    return 1
