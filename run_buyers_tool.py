#!/usr/bin/env python
"""
Run script for the Buyer's Tool.
Use: python run_buyers_tool.py input.json --timestamp 2026-01-15T12:00:00Z
Or: buyers-tool input.json --timestamp 2026-01-15T12:00:00Z
"""
import sys

from buyers_tool.cli import main


if __name__ == "__main__":
    sys.exit(main())
