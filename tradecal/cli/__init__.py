"""CLI commands for TradeCal.

This package provides the command-line interface: the month calendar,
day drill-down, stats, holiday listing and the interactive browser.
"""

from tradecal.cli.main import cli, main

__all__ = ["cli", "main"]
