"""Calendar browser view state and its reducer.

The browser has two modes: the month grid and the day detail view. All
interactions are expressed as actions and applied through ``reduce``,
which returns a new ViewState and never mutates the old one.
"""

from datetime import date
from typing import Union

from pydantic import BaseModel, Field

from tradecal.calendar.grid import days_in_month, is_disabled
from tradecal.calendar.holidays import HolidayProvider
from tradecal.models import ViewState


class SelectDay(BaseModel):
    """Open the day detail view for a day of the current month."""

    day: int = Field(..., description="Day of month")

    model_config = {"frozen": True}


class CloseDay(BaseModel):
    """Close the day detail view."""

    model_config = {"frozen": True}


class SelectMonth(BaseModel):
    """Switch the grid to another month."""

    month: int = Field(..., description="Month (1-12)")

    model_config = {"frozen": True}


Action = Union[SelectDay, CloseDay, SelectMonth]


def initial_state(year: int, month: int = 1) -> ViewState:
    return ViewState(year=year, month=month, mode="grid", selected_day=None)


def can_select_day(state: ViewState, day: int, provider: HolidayProvider) -> bool:
    """True if ``day`` exists in the current month and is not disabled."""
    if not 1 <= day <= days_in_month(state.year, state.month):
        return False
    return not is_disabled(date(state.year, state.month, day), provider)


def reduce(state: ViewState, action: Action, provider: HolidayProvider) -> ViewState:
    """Apply an action to the view state.

    Args:
        state: Current state.
        action: SelectDay, CloseDay or SelectMonth.
        provider: Holiday source, used to reject disabled days.

    Returns:
        The next state. Selecting a weekend, holiday or out-of-range day
        returns ``state`` unchanged.

    Raises:
        ValueError: If SelectMonth carries a month outside 1..12, or the
            action type is unknown.
    """
    if isinstance(action, SelectDay):
        if not can_select_day(state, action.day, provider):
            return state
        return state.model_copy(update={"mode": "day", "selected_day": action.day})

    if isinstance(action, CloseDay):
        return state.model_copy(update={"mode": "grid", "selected_day": None})

    if isinstance(action, SelectMonth):
        if not 1 <= action.month <= 12:
            raise ValueError(f"Invalid month: {action.month}. Must be between 1 and 12")
        # Day selection is not carried across months
        return state.model_copy(update={"month": action.month, "mode": "grid", "selected_day": None})

    raise ValueError(f"Unknown action: {action!r}")
