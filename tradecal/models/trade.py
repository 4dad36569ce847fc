"""TradeRecord data model."""

from datetime import date as date_type
from typing import Optional
from pydantic import BaseModel, Field


class TradeRecord(BaseModel):
    """Represents one closed trade parsed from the CSV trade log."""

    date: date_type = Field(..., description="Trade date taken from the Open timestamp")
    opened_at: str = Field(default="", description="Raw Open timestamp text")
    pl: float = Field(..., description="Signed profit/loss amount")
    is_win: bool = Field(..., description="False only when the raw P/L text starts with '-'")
    entry_price: Optional[float] = Field(default=None, description="Entry price, if present")
    exit_price: Optional[float] = Field(default=None, description="Exit price, if present")
    symbol: Optional[str] = Field(default=None, description="Trading symbol, if present")

    model_config = {"frozen": True}

    @property
    def wins(self) -> int:
        return 1 if self.is_win else 0

    @property
    def losses(self) -> int:
        return 0 if self.is_win else 1
