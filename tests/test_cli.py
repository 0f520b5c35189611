"""Tests for the finances command line interface."""

from pathlib import Path

import pandas as pd
import pytest
from typer.testing import CliRunner

from finances.cli import app
from finances.config import get_config_path, load_config, save_config

runner = CliRunner()

FIXTURE_ARGS = [
    "project",
    "--years",
    "40",
    "--start-year",
    "2020",
    "--principal",
    "10000",
    "--profit",
    "3000",
    "--interest",
    "10",
    "--tax",
    "25",
]


@pytest.fixture(autouse=True)
def config_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point the config file at a temporary directory and widen the console."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("COLUMNS", "200")
    return tmp_path


class TestInitCommand:
    """Tests for 'finances init'."""

    def test_creates_config(self) -> None:
        """Should write the default config."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert get_config_path().exists()

    def test_refuses_to_overwrite(self) -> None:
        """Should fail when a config exists and --force is not given."""
        save_config({"projection": {"duration": 3}})

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "Config already exists" in result.output
        assert load_config()["projection"] == {"duration": 3}

    def test_force_overwrites(self) -> None:
        save_config({"projection": {"duration": 3}})

        result = runner.invoke(app, ["init", "--force"])

        assert result.exit_code == 0
        assert load_config()["projection"]["duration"] == 40


class TestConfigCommand:
    """Tests for 'finances config'."""

    def test_shows_settings(self) -> None:
        """Should list the settings in use."""
        save_config({"projection": {"interest_rate": 7}})

        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "interest_rate" in result.output
        assert "7" in result.output

    def test_invalid_config_fails(self) -> None:
        """Should report a config file that is not valid TOML."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True)
        config_path.write_text("projection = [")

        result = runner.invoke(app, ["config"])

        assert result.exit_code == 1
        assert "Invalid config file" in result.output


class TestProjectCommand:
    """Tests for 'finances project'."""

    def test_prints_table(self) -> None:
        """Should print the projection table."""
        result = runner.invoke(app, FIXTURE_ARGS)

        assert result.exit_code == 0
        assert "Projection 2020-2060" in result.output
        assert "€10,000.00" in result.output
        assert "€12,250.00" in result.output

    def test_uses_config_values(self) -> None:
        """Should take settings from the config file."""
        save_config({"projection": {"start_year": 2030, "duration": 2}})

        result = runner.invoke(app, ["project"])

        assert result.exit_code == 0
        assert "Projection 2030-2032" in result.output

    def test_flags_override_config(self) -> None:
        save_config({"projection": {"start_year": 2030, "duration": 2}})

        result = runner.invoke(app, ["project", "--years", "5"])

        assert result.exit_code == 0
        assert "Projection 2030-2035" in result.output

    def test_writes_csv(self, tmp_path: Path) -> None:
        """Should export the table to CSV."""
        csv_path = tmp_path / "projection.csv"

        result = runner.invoke(app, [*FIXTURE_ARGS, "--deposit", "2500", "--csv", str(csv_path)])

        assert result.exit_code == 0
        frame = pd.read_csv(csv_path)
        assert len(frame) == 41
        assert list(frame.columns)[0] == "Year"
        assert frame.loc[0, "Year"] == 2020
        assert frame.loc[0, "Deposits & Withdrawals"] == 2500.0
        assert frame.loc[1, "Full-term Principal"] == 12500.0
        assert frame.loc[1, "Full-term Profit"] == 4300.0
        assert frame.loc[40, "Year"] == 2060

    def test_invalid_rate_fails(self) -> None:
        """Should report an out-of-range rate and exit with an error."""
        result = runner.invoke(app, [*FIXTURE_ARGS, "--interest", "150"])

        assert result.exit_code == 1
        assert "Invalid projection" in result.output

    def test_negative_years_fails(self) -> None:
        result = runner.invoke(app, ["project", "--years=-1"])

        assert result.exit_code == 1
        assert "duration must not be negative" in result.output

    def test_malformed_amount_fails(self) -> None:
        result = runner.invoke(app, ["project", "--principal", "lots"])

        assert result.exit_code == 1
        assert "Could not parse amount" in result.output

    def test_verbose(self) -> None:
        """Should accept the global verbose flag."""
        result = runner.invoke(app, ["--verbose", *FIXTURE_ARGS])

        assert result.exit_code == 0


class TestUnreadableInput:
    """Tests for input that cannot be turned into a projection."""

    def test_huge_amount_fails(self) -> None:
        """Should report an amount too large to handle instead of crashing."""
        result = runner.invoke(app, ["project", "--principal", "1e1000000"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "out of range" in result.output

    @pytest.mark.parametrize("command", ["project", "config"])
    def test_config_path_is_directory(self, command: str) -> None:
        """Should report a config path that cannot be read."""
        get_config_path().mkdir(parents=True)

        result = runner.invoke(app, [command])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Could not read config file" in result.output

    @pytest.mark.parametrize("command", ["project", "config"])
    def test_config_not_utf8(self, command: str) -> None:
        """Should report a config file that is not UTF-8."""
        config_path = get_config_path()
        config_path.parent.mkdir(parents=True)
        config_path.write_bytes(b"[projection]\nduration = \xff\n")

        result = runner.invoke(app, [command])

        assert result.exit_code == 1
        assert "Invalid config file" in result.output
