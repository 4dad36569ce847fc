"""CSV trade log loader.

Parses a broker CSV export into TradeRecord objects. The only required
columns are "Open" (``"<date> @ <time>"``) and "P/L" (``"$12.50"`` or
``"-$12.50"``). Rows that cannot be parsed are skipped with a warning;
a single bad row never aborts the whole load.
"""

import csv
import io
import logging
import math
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any, Mapping, Optional

import pandas as pd
from pydantic import BaseModel, Field

from tradecal.models import TradeRecord

logger = logging.getLogger(__name__)

OPEN_SEPARATOR = " @ "

DATE_FORMATS = [
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%m/%d/%y",
    "%b %d, %Y",
    "%B %d, %Y",
]

# Normalized header name -> TradeRecord field
COLUMN_ALIASES = {
    "open": "open",
    "pl": "pl",
    "entryprice": "entry_price",
    "entry": "entry_price",
    "exitprice": "exit_price",
    "exit": "exit_price",
    "symbol": "symbol",
    "ticker": "symbol",
}

REQUIRED_COLUMNS = ("open", "pl")


class LoadResult(BaseModel):
    """Outcome of loading a trade log."""

    records: list[TradeRecord] = Field(default_factory=list, description="Parsed trades in file order")
    skipped: int = Field(default=0, ge=0, description="Malformed rows dropped")
    error: Optional[str] = Field(default=None, description="Diagnostic message on load failure")
    source: Optional[str] = Field(default=None, description="Where the CSV came from")

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        return self.error is None


def normalize_header(name: str) -> str:
    """Normalize a column name so "P/L", "p l" and "PL" all match."""
    return re.sub(r"[^a-z0-9]+", "", (name or "").strip().lower())


def _cell(value: Any) -> str:
    """Return the cell as stripped text, treating NaN/None as empty."""
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value).strip()


def parse_trade_date(open_text: str) -> date:
    """Extract the calendar date from an "Open" timestamp.

    Args:
        open_text: Text such as "2025-03-05 @ 09:30".

    Returns:
        The date part as a ``date``.

    Raises:
        ValueError: If the date part matches none of DATE_FORMATS.
    """
    date_part = open_text.split(OPEN_SEPARATOR)[0].strip()
    if not date_part:
        raise ValueError("empty Open value")

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(date_part, fmt).date()
        except ValueError:
            continue

    raise ValueError(f"unrecognized date {date_part!r}")


def parse_pl(pl_text: str) -> tuple[float, bool]:
    """Parse a "P/L" cell.

    The win flag is a textual check: the trade is a loss if and only if the
    text begins with "-". "$0.00" is therefore a win.

    Returns:
        Tuple of (signed amount, is_win).

    Raises:
        ValueError: If the text is empty or not numeric.
    """
    text = pl_text.strip()
    if not text:
        raise ValueError("empty P/L value")

    is_win = not text.startswith("-")
    cleaned = text.replace("$", "").replace(",", "").replace(" ", "")
    value = float(cleaned)
    if not math.isfinite(value):
        raise ValueError(f"non-finite P/L {pl_text!r}")

    return value, is_win


def parse_price(price_text: str) -> Optional[float]:
    """Parse an optional price cell, returning None when blank or invalid."""
    text = price_text.replace("$", "").replace(",", "").strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        logger.debug("Ignoring non-numeric price %r", price_text)
        return None
    return value if math.isfinite(value) else None


def parse_trade_row(row: Mapping[str, Any]) -> TradeRecord:
    """Build a TradeRecord from one CSV row keyed by normalized field name.

    Raises:
        ValueError: If a required column is missing or malformed.
    """
    open_text = _cell(row.get("open"))
    pl_text = _cell(row.get("pl"))

    if not open_text:
        raise ValueError("missing Open column")
    if not pl_text:
        raise ValueError("missing P/L column")

    trade_date = parse_trade_date(open_text)
    pl, is_win = parse_pl(pl_text)

    symbol = _cell(row.get("symbol")) or None

    return TradeRecord(
        date=trade_date,
        opened_at=open_text,
        pl=pl,
        is_win=is_win,
        entry_price=parse_price(_cell(row.get("entry_price"))),
        exit_price=parse_price(_cell(row.get("exit_price"))),
        symbol=symbol,
    )


def _rename_columns(columns: list[str]) -> dict[int, str]:
    """Map CSV header positions to record fields, first match wins."""
    mapping: dict[int, str] = {}
    for index, column in enumerate(columns):
        field = COLUMN_ALIASES.get(normalize_header(column))
        if field and field not in mapping.values():
            mapping[index] = field
    return mapping


def _split_rows(text: str) -> tuple[list[str], list[list[str]], list[list[str]]]:
    """Tokenize CSV text into (header, rows, rows with too many fields).

    Blank lines are dropped. Trailing empty fields past the header width
    (a trailing delimiter) are trimmed, short rows are padded with "".

    Raises:
        csv.Error: If the text is not valid CSV.
    """
    lines = [row for row in csv.reader(io.StringIO(text), skipinitialspace=True) if row]
    if not lines:
        return [], [], []

    header = [h.strip() for h in lines[0]]
    width = len(header)
    rows: list[list[str]] = []
    bad_lines: list[list[str]] = []
    for fields in lines[1:]:
        while len(fields) > width and not fields[-1].strip():
            fields = fields[:-1]
        if len(fields) > width:
            bad_lines.append(fields)
            continue
        rows.append(fields + [""] * (width - len(fields)))
    return header, rows, bad_lines


def parse_trades_csv(text: str, source: Optional[str] = None) -> LoadResult:
    """Parse CSV text into trade records.

    Args:
        text: Raw CSV document with a header row.
        source: Optional label (file path) used in diagnostics.

    Returns:
        LoadResult with parsed records, the number of skipped rows, and an
        error message if the text could not be read as a trade CSV.
    """
    try:
        header, rows, bad_lines = _split_rows(text)
    except csv.Error as e:
        logger.error("Could not parse trade log %s: %s", source or "<text>", e)
        return LoadResult(error=f"Could not parse CSV: {e}", source=source)

    if not header:
        logger.error("Trade log %s is empty", source or "<text>")
        return LoadResult(error="Trade log is empty", source=source)

    mapping = _rename_columns(header)
    missing = [c for c in REQUIRED_COLUMNS if c not in mapping.values()]
    if missing:
        names = ", ".join("P/L" if c == "pl" else c.capitalize() for c in missing)
        logger.error("Trade log %s is missing column(s): %s", source or "<text>", names)
        return LoadResult(error=f"Missing required column(s): {names}", source=source)

    df = pd.DataFrame(
        [[fields[i] for i in mapping] for fields in rows],
        columns=list(mapping.values()),
        dtype=str,
    )

    records: list[TradeRecord] = []
    skipped = len(bad_lines)
    for fields in bad_lines:
        logger.warning(
            "Skipping malformed row in %s: %d fields, expected %d: %r",
            source or "<text>", len(fields), len(header), fields,
        )

    for row_no, row in enumerate(df.to_dict(orient="records"), start=1):
        try:
            records.append(parse_trade_row(row))
        except ValueError as e:
            skipped += 1
            logger.warning("Skipping malformed row %d in %s: %s", row_no, source or "<text>", e)

    logger.debug("Loaded %d trades (%d skipped) from %s", len(records), skipped, source or "<text>")
    return LoadResult(records=records, skipped=skipped, source=source)


def load_trades(path: Path) -> LoadResult:
    """Load a trade log from disk.

    Never raises: an unreachable or unreadable file yields an empty
    LoadResult carrying a diagnostic message, so callers can still render
    an empty calendar.
    """
    path = Path(path)

    if not path.exists():
        logger.error("Trade log not found: %s", path)
        return LoadResult(error=f"Trade log not found: {path}", source=str(path))

    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Could not read trade log %s: %s", path, e)
        return LoadResult(error=f"Could not read {path}: {e}", source=str(path))

    return parse_trades_csv(text, source=str(path))
