#!/usr/bin/env python
"""
Entry point for running the causeway usage example.

This script sets up the Python path and prints an example error report.
"""

import sys
from pathlib import Path

# Add src directory to Python path
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

# Check for required dependencies
try:
    import dotenv  # noqa: F401
except ImportError as e:
    print(f"""
Error: Missing required dependencies

{e}

Please make sure you have activated your virtual environment and installed dependencies:

    pip install -e .

Then try running again:
    python run.py
""")
    sys.exit(1)

from causeway.demo import main


if __name__ == "__main__":
    sys.exit(main())
