#!/usr/bin/env python3
"""
Main script: turn a narration script into scenes with stock footage.
Uses the pipeline in src/broll_organizer; run from project root.
"""

import sys
from pathlib import Path

# Ensure src is on path when running without installing the package
_SRC = Path(__file__).resolve().parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from broll_organizer.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
