"""Market holiday providers.

A provider maps a year to a table of ISO date -> holiday name. The
calendar asks the provider instead of relying on a hardcoded year, so
extra years can be supplied from the config file without code changes.
"""

from abc import ABC, abstractmethod
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional


US_MARKET_HOLIDAYS_2025: Mapping[str, str] = MappingProxyType({
    "2025-01-01": "New Year's Day",
    "2025-01-09": "Jimmy Carter's Mourning",
    "2025-01-20": "Martin Luther King Jr. Day",
    "2025-02-17": "Presidents' Day",
    "2025-04-18": "Good Friday",
    "2025-05-26": "Memorial Day",
    "2025-06-19": "Juneteenth",
    "2025-07-04": "Independence Day",
    "2025-09-01": "Labor Day",
    "2025-11-27": "Thanksgiving Day",
    "2025-12-25": "Christmas Day",
})

BUILTIN_HOLIDAYS: Mapping[int, Mapping[str, str]] = MappingProxyType({
    2025: US_MARKET_HOLIDAYS_2025,
})


class HolidayProvider(ABC):
    """Abstract source of holiday tables keyed by year."""

    @abstractmethod
    def holidays_for(self, year: int) -> Mapping[str, str]:
        """Get the holiday table for a year.

        Args:
            year: Calendar year.

        Returns:
            Mapping of ISO date string to holiday name. Empty if the
            provider knows no holidays for that year.
        """
        pass

    def holiday_name(self, day: date) -> Optional[str]:
        """Return the holiday name for a date, or None."""
        return self.holidays_for(day.year).get(day.isoformat())

    def is_holiday(self, day: date) -> bool:
        return self.holiday_name(day) is not None

    def years(self) -> list[int]:
        """Years this provider has tables for."""
        return []


class StaticHolidayProvider(HolidayProvider):
    """Holiday provider backed by in-memory tables."""

    def __init__(self, tables: Optional[Mapping[int, Mapping[str, str]]] = None):
        """Initialize the provider.

        Args:
            tables: Year -> {ISO date: name}. Defaults to the built-in
                2025 US market holidays.
        """
        source = BUILTIN_HOLIDAYS if tables is None else tables
        self._tables = {
            int(year): MappingProxyType(dict(table))
            for year, table in source.items()
        }
        for year, table in self._tables.items():
            for iso in table:
                if date.fromisoformat(iso).year != year:
                    raise ValueError(f"Holiday {iso} is listed under year {year}")

    def holidays_for(self, year: int) -> Mapping[str, str]:
        return self._tables.get(year, MappingProxyType({}))

    def years(self) -> list[int]:
        return sorted(self._tables)


def holiday_provider_from_config(config: Optional[dict]) -> StaticHolidayProvider:
    """Build a provider from the ``[holidays."<year>"]`` config tables.

    Config tables are merged over the built-in ones, so a config entry can
    add holidays to 2025 or rename an existing one.

    Raises:
        ValueError: If a year key or date in the config is invalid.
    """
    tables: dict[int, dict[str, str]] = {
        year: dict(table) for year, table in BUILTIN_HOLIDAYS.items()
    }

    configured = (config or {}).get("holidays", {})
    if not isinstance(configured, dict):
        raise ValueError("[holidays] in config must be a table of years")

    for year_key, table in configured.items():
        try:
            year = int(year_key)
        except ValueError:
            raise ValueError(f"Invalid holiday year in config: {year_key!r}")
        if not isinstance(table, dict):
            raise ValueError(f'[holidays."{year_key}"] in config must be a table of dates')
        merged = tables.setdefault(year, {})
        for iso, name in table.items():
            try:
                day = date.fromisoformat(iso)
            except ValueError:
                raise ValueError(f"Invalid holiday date in config: {iso!r}")
            # Keyed the way holiday_name looks dates up
            merged[day.isoformat()] = str(name)

    return StaticHolidayProvider(tables)
