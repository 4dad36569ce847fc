"""Trade aggregation by calendar day, month and year.

All functions are pure: they take the full record list plus a date filter
and return a fresh DaySummary. Empty selections produce the zero summary.
"""

from collections import defaultdict
from datetime import date
from typing import Iterable, Optional

from tradecal.models import DaySummary, TradeRecord


def calculate_win_rate(wins: int, total_trades: int) -> float:
    """Calculate win rate as a percentage rounded to 2 decimals.

    Args:
        wins: Number of winning trades.
        total_trades: Number of trades.

    Returns:
        Win rate in [0, 100]; 0.0 when there are no trades.
    """
    if total_trades <= 0:
        return 0.0
    return round(wins / total_trades * 100, 2)


def summarize(records: Iterable[TradeRecord]) -> DaySummary:
    """Summarize a set of trades.

    P/L is summed at full precision; rounding is left to display code.
    """
    total_trades = 0
    total_wins = 0
    total_losses = 0
    total_pl = 0.0

    for record in records:
        total_trades += 1
        total_wins += record.wins
        total_losses += record.losses
        total_pl += record.pl

    return DaySummary(
        total_trades=total_trades,
        total_wins=total_wins,
        total_losses=total_losses,
        total_pl=total_pl,
        win_rate=calculate_win_rate(total_wins, total_trades),
    )


def records_for_day(records: Iterable[TradeRecord], day_date: date) -> list[TradeRecord]:
    """Return the trades made on a given date, in file order."""
    return [r for r in records if r.date == day_date]


def aggregate_day(records: Iterable[TradeRecord], day: int, month: int, year: int) -> DaySummary:
    """Summarize trades on exactly one calendar day."""
    return summarize(
        r for r in records
        if r.date.day == day and r.date.month == month and r.date.year == year
    )


def aggregate_month(records: Iterable[TradeRecord], month: int, year: int) -> DaySummary:
    """Summarize trades within one month of one year."""
    return summarize(
        r for r in records
        if r.date.month == month and r.date.year == year
    )


def aggregate_year(records: Iterable[TradeRecord], year: Optional[int] = None) -> DaySummary:
    """Summarize the yearly stats.

    Args:
        records: All loaded trades.
        year: Restrict to this year. When None, every loaded record is
            counted, whatever year it falls in.
    """
    if year is None:
        return summarize(records)
    return summarize(r for r in records if r.date.year == year)


def daily_summaries(records: Iterable[TradeRecord]) -> dict[date, DaySummary]:
    """Build a date -> DaySummary map in a single pass.

    Computed once per load so the month grid can look days up by key
    instead of re-filtering the full record set for every cell.
    """
    by_date: dict[date, list[TradeRecord]] = defaultdict(list)
    for record in records:
        by_date[record.date].append(record)

    return {d: summarize(day_records) for d, day_records in sorted(by_date.items())}
