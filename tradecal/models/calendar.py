"""Calendar cell and view state models."""

from datetime import date as date_type
from typing import Literal, Optional
from pydantic import BaseModel, Field

from tradecal.models.summary import DaySummary

DayState = Literal["holiday", "weekend", "profit", "loss", "empty"]
ViewMode = Literal["grid", "day"]


class DayCell(BaseModel):
    """One day of the month grid with its annotations."""

    day: int = Field(..., ge=1, le=31, description="Day of month")
    date: date_type = Field(..., description="Calendar date")
    state: DayState = Field(..., description="Visual state of the cell")
    label: str = Field(default="", description="Tooltip text (holiday name, Weekend, No data)")
    summary: DaySummary = Field(default_factory=DaySummary, description="Trades on this day")
    disabled: bool = Field(default=False, description="Weekend or holiday, not selectable")

    model_config = {"frozen": True}


class ViewState(BaseModel):
    """Immutable UI selection state for the calendar browser."""

    year: int = Field(..., ge=1, le=9999, description="Calendar year shown")
    month: int = Field(default=1, ge=1, le=12, description="Selected month")
    mode: ViewMode = Field(default="grid", description="Month grid or day detail")
    selected_day: Optional[int] = Field(default=None, ge=1, le=31, description="Open day, if any")

    model_config = {"frozen": True}
