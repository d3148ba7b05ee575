#!/usr/bin/env python3
"""Convenience script to run the Aptos MCP server.

Usage:
    python run_mcp_server.py
"""

import sys
from pathlib import Path

# Make the src package importable when run from a checkout
sys.path.insert(0, str(Path(__file__).parent))

from src.aptos_mcp.main import run


if __name__ == "__main__":
    run()
