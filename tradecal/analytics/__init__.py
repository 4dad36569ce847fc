"""Trade aggregation module."""

from tradecal.analytics.aggregator import (
    aggregate_day,
    aggregate_month,
    aggregate_year,
    calculate_win_rate,
    daily_summaries,
    records_for_day,
    summarize,
)

__all__ = [
    "aggregate_day",
    "aggregate_month",
    "aggregate_year",
    "calculate_win_rate",
    "daily_summaries",
    "records_for_day",
    "summarize",
]
