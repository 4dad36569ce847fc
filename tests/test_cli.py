"""Tests for the TradeCal command line interface.

**Feature: trading-calendar**
"""

from pathlib import Path

import pytest
import toml
from click.testing import CliRunner
from rich.console import Console

from tradecal.cli import cli
from tradecal.cli import browse as browse_module
from tradecal.cli import configure as configure_module
from tradecal.cli import view as view_module
from tradecal.cli.browse import QUIT, parse_command
from tradecal.calendar import CloseDay, SelectDay, SelectMonth, initial_state


TRADES_CSV = """Open,Close,P/L,Entry Price,Exit Price
2025-03-05 @ 09:30,2025-03-05 @ 10:15,-$120.50,101.25,99.90
2025-03-05 @ 11:00,2025-03-05 @ 11:45,$250.00,100.00,102.50
2025-03-06 @ 09:45,2025-03-06 @ 10:00,$0.00,,
2025-03-08 @ 09:45,2025-03-08 @ 10:00,$75.00,,
2025-04-18 @ 09:45,2025-04-18 @ 10:00,-$10.00,,
"""


@pytest.fixture
def wide_console(monkeypatch):
    """Render to a wide, colorless console so output is easy to match."""
    console = Console(width=200, color_system=None)
    for module in (view_module, browse_module, configure_module):
        monkeypatch.setattr(module, "console", console)
    return console


@pytest.fixture
def csv_file(tmp_path: Path) -> Path:
    path = tmp_path / "output.csv"
    path.write_text(TRADES_CSV, encoding="utf-8")
    return path


@pytest.fixture
def runner(tmp_path: Path, monkeypatch, wide_console) -> CliRunner:
    monkeypatch.setenv("TRADECAL_CONFIG", str(tmp_path / "config.toml"))
    return CliRunner()


class TestCalendarCommand:
    """Month grid output."""

    def test_march_grid_and_stats(self, runner, csv_file):
        result = runner.invoke(cli, ["calendar", str(csv_file), "--month", "3"])

        assert result.exit_code == 0, result.output
        assert "Trading Calendar - March 2025" in result.output
        assert "Yearly Stats" in result.output
        assert "Monthly Stats" in result.output
        assert "Total Trades: 5" in result.output
        assert "Total Trades: 4" in result.output
        assert "$129.50" in result.output

    def test_weekend_trades_reported(self, runner, csv_file):
        result = runner.invoke(cli, ["calendar", str(csv_file), "-m", "3"])

        assert result.exit_code == 0, result.output
        assert "1 trade(s) on closed days" in result.output
        assert "2025-03-08" in result.output

    def test_missing_file_renders_empty_calendar(self, runner, tmp_path):
        result = runner.invoke(cli, ["calendar", str(tmp_path / "nope.csv")])

        assert result.exit_code == 0, result.output
        assert "Load Error" in result.output
        assert "Trading Calendar - January 2025" in result.output
        assert "Total Trades: 0" in result.output
        assert "Win Rate: 0.00%" in result.output

    def test_invalid_month(self, runner, csv_file):
        result = runner.invoke(cli, ["calendar", str(csv_file), "--month", "13"])
        assert result.exit_code == 2

    def test_csv_path_from_config(self, runner, csv_file, tmp_path):
        config_path = tmp_path / "config.toml"
        config_path.write_text(toml.dumps({
            "data": {"csv_path": str(csv_file)},
            "calendar": {"default_month": 4},
        }))

        result = runner.invoke(cli, ["calendar"])

        assert result.exit_code == 0, result.output
        assert "Trading Calendar - April 2025" in result.output
        assert "Good Friday" in result.output

    @pytest.mark.parametrize(
        "config",
        ['holidays = "x"\n', '[holidays]\n2025 = "x"\n', '[holidays."2025"]\n"Jan 1" = "x"\n'],
    )
    def test_bad_holiday_config(self, runner, csv_file, tmp_path, config):
        (tmp_path / "config.toml").write_text(config)

        result = runner.invoke(cli, ["calendar", str(csv_file)])

        assert result.exit_code == 1
        assert "Configuration Error" in result.output

    @pytest.mark.parametrize(
        "config,setting",
        [('[calendar]\nyear = "abc"\n', "calendar.year"), ('[calendar]\ndefault_month = "june"\n', "default_month")],
    )
    def test_bad_calendar_config(self, runner, csv_file, tmp_path, config, setting):
        (tmp_path / "config.toml").write_text(config)

        result = runner.invoke(cli, ["calendar", str(csv_file)])

        assert result.exit_code == 2
        assert setting in result.output


class TestDayCommand:
    """Day drill-down output."""

    def test_trading_day_detail(self, runner, csv_file):
        result = runner.invoke(cli, ["day", "2025-03-05", str(csv_file)])

        assert result.exit_code == 0, result.output
        assert "Trade Breakdown" in result.output
        assert "Wins/Losses: 1/1" in result.output
        assert "Win Rate: 50.00%" in result.output
        assert "$129.50" in result.output
        assert "-$120.50" in result.output
        assert "Loss" in result.output
        assert "$101.25" in result.output

    def test_day_without_trades(self, runner, csv_file):
        result = runner.invoke(cli, ["day", "2025-03-07", str(csv_file)])

        assert result.exit_code == 0, result.output
        assert "No trades recorded" in result.output

    @pytest.mark.parametrize("day,reason", [("2025-03-08", "Weekend"), ("2025-04-18", "Good Friday")])
    def test_disabled_days(self, runner, csv_file, day, reason):
        result = runner.invoke(cli, ["day", day, str(csv_file)])

        assert result.exit_code == 1
        assert "disabled day" in result.output
        assert reason in result.output

    def test_bad_date(self, runner, csv_file):
        result = runner.invoke(cli, ["day", "March 5", str(csv_file)])
        assert result.exit_code == 2


class TestStatsAndHolidays:
    def test_stats(self, runner, csv_file):
        result = runner.invoke(cli, ["stats", str(csv_file), "-m", "4"])

        assert result.exit_code == 0, result.output
        assert "Total Trades: 1" in result.output
        assert "-$10.00" in result.output

    def test_holidays_2025(self, runner):
        result = runner.invoke(cli, ["holidays"])

        assert result.exit_code == 0, result.output
        assert "Juneteenth" in result.output
        assert "2025-11-27" in result.output

    def test_holidays_unknown_year(self, runner):
        result = runner.invoke(cli, ["holidays", "--year", "2031"])

        assert result.exit_code == 0, result.output
        assert "No holidays configured for 2031" in result.output


class TestInitCommand:
    def test_creates_template(self, runner, tmp_path):
        result = runner.invoke(cli, ["init"])

        assert result.exit_code == 0, result.output
        config = toml.load(tmp_path / "config.toml")
        assert config["calendar"]["year"] == 2025
        assert config["data"]["csv_path"] == "output.csv"

    def test_refuses_to_overwrite(self, runner, tmp_path):
        (tmp_path / "config.toml").write_text("[data]\n")

        result = runner.invoke(cli, ["init"])

        assert result.exit_code == 1
        assert "already exists" in result.output


class TestBrowser:
    """Interactive browsing goes through the reducer."""

    def test_parse_commands(self):
        state = initial_state(2025, 12)

        assert parse_command("q", state) == QUIT
        assert parse_command("c", state) == CloseDay()
        assert parse_command("m 3", state) == SelectMonth(month=3)
        assert parse_command("d 15", state) == SelectDay(day=15)
        assert parse_command("n", state) == SelectMonth(month=1)
        assert parse_command("p", initial_state(2025, 1)) == SelectMonth(month=12)

    @pytest.mark.parametrize("text", ["", "m", "m 13", "d x", "zoom"])
    def test_parse_errors(self, text):
        with pytest.raises(ValueError):
            parse_command(text, initial_state(2025))

    def test_session(self, runner, csv_file):
        commands = "\n".join(["d 8", "d 5", "m 4", "d 18", "zoom", "q"]) + "\n"
        result = runner.invoke(cli, ["browse", str(csv_file), "-m", "3"], input=commands)

        assert result.exit_code == 0, result.output
        assert "5 trades loaded" in result.output
        assert "March 8 is not a trading day" in result.output
        assert "Trade Breakdown" in result.output
        assert "Trading Calendar - April 2025" in result.output
        assert "April 18 is not a trading day" in result.output
        assert "unknown command 'zoom'" in result.output
