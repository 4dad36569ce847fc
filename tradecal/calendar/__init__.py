"""Calendar grid, holidays and view state."""

from tradecal.calendar.grid import (
    MONTH_NAMES,
    WEEKDAY_HEADERS,
    build_month_cells,
    classify_day,
    generate_days_in_month,
    is_disabled,
    is_weekend,
    suppressed_records,
)
from tradecal.calendar.holidays import (
    HolidayProvider,
    StaticHolidayProvider,
    holiday_provider_from_config,
)
from tradecal.calendar.state import (
    CloseDay,
    SelectDay,
    SelectMonth,
    initial_state,
    reduce,
)

__all__ = [
    "MONTH_NAMES",
    "WEEKDAY_HEADERS",
    "build_month_cells",
    "classify_day",
    "generate_days_in_month",
    "is_disabled",
    "is_weekend",
    "suppressed_records",
    "HolidayProvider",
    "StaticHolidayProvider",
    "holiday_provider_from_config",
    "CloseDay",
    "SelectDay",
    "SelectMonth",
    "initial_state",
    "reduce",
]
