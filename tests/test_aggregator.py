"""Property-based tests for trade aggregation.

**Feature: trading-calendar**
"""

from datetime import date

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tradecal.analytics import (
    aggregate_day,
    aggregate_month,
    aggregate_year,
    calculate_win_rate,
    daily_summaries,
    records_for_day,
    summarize,
)
from tradecal.calendar import generate_days_in_month
from tradecal.models import DaySummary, TradeRecord


def trade_strategy(min_date: date = date(2024, 1, 1), max_date: date = date(2026, 12, 31)):
    """Generate valid TradeRecord objects for testing."""
    return st.builds(
        lambda d, pl, negative_text: TradeRecord(
            date=d,
            opened_at=f"{d.isoformat()} @ 09:30",
            pl=pl,
            is_win=not (negative_text if pl == 0 else pl < 0),
        ),
        st.dates(min_value=min_date, max_value=max_date),
        st.floats(min_value=-5000.0, max_value=5000.0, allow_nan=False, allow_infinity=False),
        st.booleans(),
    )


def make_trade(d: date, pl: float) -> TradeRecord:
    return TradeRecord(date=d, opened_at=f"{d.isoformat()} @ 09:30", pl=pl, is_win=pl >= 0)


class TestWinRate:
    """
    *For any* counts, the win rate is a percentage in [0, 100] rounded to
    2 decimals, and 0 when there are no trades.
    """

    def test_zero_trades(self):
        assert calculate_win_rate(0, 0) == 0.0

    def test_rounding(self):
        assert calculate_win_rate(1, 3) == 33.33
        assert calculate_win_rate(2, 3) == 66.67
        assert calculate_win_rate(3, 3) == 100.0

    @given(total=st.integers(min_value=0, max_value=10_000), data=st.data())
    @settings(max_examples=100)
    def test_win_rate_bounds(self, total: int, data):
        wins = data.draw(st.integers(min_value=0, max_value=total))
        rate = calculate_win_rate(wins, total)

        assert 0 <= rate <= 100
        if total == 0:
            assert rate == 0


class TestSummaries:
    """
    *For any* set of trades, wins plus losses equals trades and the P/L
    total equals the sum of the trades' P/L.
    """

    def test_empty_summary(self):
        summary = summarize([])

        assert summary == DaySummary.empty()
        assert summary.total_trades == 0
        assert summary.win_rate == 0
        assert summary.total_pl == 0

    @given(trades=st.lists(trade_strategy(), min_size=0, max_size=60))
    @settings(max_examples=100)
    def test_counts_add_up(self, trades: list[TradeRecord]):
        summary = summarize(trades)

        assert summary.total_trades == len(trades)
        assert summary.total_wins + summary.total_losses == summary.total_trades
        assert summary.total_pl == pytest.approx(sum(t.pl for t in trades), abs=1e-6)
        assert 0 <= summary.win_rate <= 100

    def test_display_rounding_keeps_full_precision(self):
        trades = [make_trade(date(2025, 3, 5), 0.004) for _ in range(3)]
        summary = summarize(trades)

        assert summary.total_pl == pytest.approx(0.012)
        assert summary.total_pl_display == 0.01


class TestDayAggregate:
    """Day aggregates match exactly one calendar date."""

    def test_spec_example_day(self):
        trades = [
            make_trade(date(2025, 3, 5), -120.50),
            make_trade(date(2025, 3, 5), 40.00),
            make_trade(date(2025, 3, 6), 10.00),
            make_trade(date(2024, 3, 5), 99.00),
        ]
        summary = aggregate_day(trades, 5, 3, 2025)

        assert summary.total_trades == 2
        assert summary.total_wins == 1
        assert summary.total_losses == 1
        assert summary.total_pl == pytest.approx(-80.50)
        assert summary.win_rate == 50.0

    def test_day_without_trades(self):
        summary = aggregate_day([make_trade(date(2025, 3, 5), 1.0)], 7, 3, 2025)
        assert summary == DaySummary.empty()

    def test_records_for_day_keeps_order(self):
        a = make_trade(date(2025, 3, 5), 1.0)
        b = make_trade(date(2025, 3, 6), 2.0)
        c = make_trade(date(2025, 3, 5), 3.0)

        assert records_for_day([a, b, c], date(2025, 3, 5)) == [a, c]

    @given(trades=st.lists(trade_strategy(), min_size=0, max_size=80))
    @settings(max_examples=100)
    def test_daily_map_matches_day_aggregate(self, trades: list[TradeRecord]):
        """
        *For any* trades, the precomputed date map gives the same summary
        as filtering the full record set for that day.
        """
        summaries = daily_summaries(trades)

        assert set(summaries) == {t.date for t in trades}
        for d, summary in summaries.items():
            assert summary == aggregate_day(trades, d.day, d.month, d.year)


class TestMonthAndYearAggregates:
    """
    *For any* month, the sum of the day aggregates' P/L equals the month
    aggregate's P/L.
    """

    @given(
        trades=st.lists(
            trade_strategy(date(2025, 1, 1), date(2025, 12, 31)),
            min_size=0,
            max_size=80,
        ),
        month=st.integers(min_value=1, max_value=12),
    )
    @settings(max_examples=100)
    def test_month_is_sum_of_days(self, trades: list[TradeRecord], month: int):
        month_summary = aggregate_month(trades, month, 2025)
        days = [d for d in generate_days_in_month(2025, month) if d is not None]
        day_summaries = [aggregate_day(trades, d, month, 2025) for d in days]

        assert sum(s.total_pl for s in day_summaries) == pytest.approx(month_summary.total_pl, abs=1e-6)
        assert sum(s.total_trades for s in day_summaries) == month_summary.total_trades
        assert sum(s.total_wins for s in day_summaries) == month_summary.total_wins

    def test_month_filters_year(self):
        trades = [make_trade(date(2025, 3, 5), 10.0), make_trade(date(2024, 3, 5), 20.0)]

        assert aggregate_month(trades, 3, 2025).total_pl == pytest.approx(10.0)
        assert aggregate_month(trades, 4, 2025) == DaySummary.empty()

    def test_year_without_filter_counts_everything(self):
        trades = [make_trade(date(2025, 3, 5), 10.0), make_trade(date(2024, 3, 5), -20.0)]

        summary = aggregate_year(trades)
        assert summary.total_trades == 2
        assert summary.total_pl == pytest.approx(-10.0)

        assert aggregate_year(trades, 2025).total_trades == 1
        assert aggregate_year(trades, 2023) == DaySummary.empty()
