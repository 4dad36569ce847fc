"""Data models for TradeCal."""

from tradecal.models.trade import TradeRecord
from tradecal.models.summary import DaySummary
from tradecal.models.calendar import DayCell, DayState, ViewMode, ViewState

__all__ = [
    "TradeRecord",
    "DaySummary",
    "DayCell",
    "DayState",
    "ViewMode",
    "ViewState",
]
