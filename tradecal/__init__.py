"""TradeCal - calendar view of daily trading performance from a CSV trade log."""

__version__ = "0.1.0"
