"""Month grid generation and day cell classification."""

import calendar
from datetime import date
from typing import Iterable, Mapping, Optional

from tradecal.calendar.holidays import HolidayProvider
from tradecal.models import DayCell, DayState, DaySummary, TradeRecord

WEEKDAY_HEADERS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

MONTH_NAMES = [calendar.month_name[i] for i in range(1, 13)]


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}. Must be between 1 and 12")


def days_in_month(year: int, month: int) -> int:
    _check_month(month)
    return calendar.monthrange(year, month)[1]


def first_weekday(year: int, month: int) -> int:
    """Weekday of the 1st of the month with Sunday = 0 ... Saturday = 6."""
    _check_month(month)
    # date.weekday() has Monday = 0
    return (date(year, month, 1).weekday() + 1) % 7


def generate_days_in_month(year: int, month: int) -> list[Optional[int]]:
    """Build the day slots of a Sunday-first month grid.

    Returns:
        Leading None placeholders for the weekdays before the 1st,
        followed by the day numbers 1..N.
    """
    slots: list[Optional[int]] = [None] * first_weekday(year, month)
    slots.extend(range(1, days_in_month(year, month) + 1))
    return slots


def is_weekend(day: date) -> bool:
    """Saturday or Sunday."""
    return day.weekday() >= 5


def is_disabled(day: date, provider: HolidayProvider) -> bool:
    """Weekend and holiday cells cannot be opened."""
    return provider.is_holiday(day) or is_weekend(day)


def classify_day(day: date, summary: DaySummary, provider: HolidayProvider) -> tuple[DayState, str]:
    """Determine a cell's state and label.

    Precedence is holiday > weekend > trade data. A day with trades that is
    also a holiday is shown as a holiday.
    """
    holiday = provider.holiday_name(day)
    if holiday is not None:
        return "holiday", holiday or "Holiday"
    if is_weekend(day):
        return "weekend", "Weekend"

    if summary.total_pl > 0:
        return "profit", _summary_label(summary)
    if summary.total_pl < 0:
        return "loss", _summary_label(summary)
    if summary.has_trades:
        return "empty", _summary_label(summary)
    return "empty", "No data"


def _summary_label(summary: DaySummary) -> str:
    return (
        f"P/L: ${summary.total_pl_display:.2f}\n"
        f"Trades: {summary.total_trades}\n"
        f"Wins/Losses: {summary.total_wins}/{summary.total_losses}"
    )


def build_day_cell(day: date, summary: DaySummary, provider: HolidayProvider) -> DayCell:
    state, label = classify_day(day, summary, provider)
    return DayCell(
        day=day.day,
        date=day,
        state=state,
        label=label,
        summary=summary,
        disabled=is_disabled(day, provider),
    )


def build_month_cells(
    year: int,
    month: int,
    summaries: Mapping[date, DaySummary],
    provider: HolidayProvider,
) -> list[Optional[DayCell]]:
    """Build the annotated grid for a month.

    Args:
        year: Calendar year.
        month: Month (1-12).
        summaries: Precomputed date -> DaySummary map (see daily_summaries).
        provider: Holiday source.

    Returns:
        One entry per grid slot: None for leading blanks, a DayCell
        otherwise.
    """
    cells: list[Optional[DayCell]] = []
    for slot in generate_days_in_month(year, month):
        if slot is None:
            cells.append(None)
            continue
        day = date(year, month, slot)
        summary = summaries.get(day) or DaySummary.empty()
        cells.append(build_day_cell(day, summary, provider))
    return cells


def chunk_weeks(cells: list) -> list[list]:
    """Split grid slots into rows of 7, padding the last row with None."""
    weeks = []
    for i in range(0, len(cells), 7):
        week = list(cells[i:i + 7])
        week.extend([None] * (7 - len(week)))
        weeks.append(week)
    return weeks


def suppressed_records(
    records: Iterable[TradeRecord],
    provider: HolidayProvider,
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> list[TradeRecord]:
    """Trades dated on weekends or holidays.

    These days are disabled in the grid, so their trades cannot be reached
    through the day view. Returned so they can be listed separately.
    """
    return [
        r for r in records
        if (year is None or r.date.year == year)
        and (month is None or r.date.month == month)
        and is_disabled(r.date, provider)
    ]
