#!/usr/bin/env python3
"""
Interactive CLI for the cribbage solver.

Usage:
    python scripts/cli.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from cribbage.cli.app import main  # noqa: E402

if __name__ == "__main__":
    main()
