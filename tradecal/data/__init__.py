"""Trade log loading."""

from tradecal.data.loader import (
    LoadResult,
    load_trades,
    parse_pl,
    parse_trade_date,
    parse_trade_row,
    parse_trades_csv,
)

__all__ = [
    "LoadResult",
    "load_trades",
    "parse_pl",
    "parse_trade_date",
    "parse_trade_row",
    "parse_trades_csv",
]
