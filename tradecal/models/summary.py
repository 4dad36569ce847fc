"""DaySummary data model."""

from pydantic import BaseModel, Field


class DaySummary(BaseModel):
    """Aggregated trade statistics for a day, month or year."""

    total_trades: int = Field(default=0, ge=0, description="Number of trades")
    total_wins: int = Field(default=0, ge=0, description="Number of winning trades")
    total_losses: int = Field(default=0, ge=0, description="Number of losing trades")
    total_pl: float = Field(default=0.0, description="Sum of P/L at full precision")
    win_rate: float = Field(default=0.0, ge=0, le=100, description="Win rate percentage")

    model_config = {"frozen": True}

    @classmethod
    def empty(cls) -> "DaySummary":
        """Zero-value summary used for days without trades."""
        return cls()

    @property
    def total_pl_display(self) -> float:
        """P/L rounded to 2 decimals for display."""
        return round(self.total_pl, 2)

    @property
    def has_trades(self) -> bool:
        return self.total_trades > 0
