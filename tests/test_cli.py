"""
Tests for the command line interface.
"""

import pytest
from typer.testing import CliRunner

from timeperiods import __version__
from timeperiods.cli.app import app


runner = CliRunner()


@pytest.fixture
def config_path(tmp_path):
    """A config file that keeps table rows narrow."""
    path = tmp_path / "timeperiods.yaml"
    path.write_text("display:\n  show_included: false\n", encoding="utf-8")
    return path


@pytest.fixture
def schedule_path(tmp_path):
    path = tmp_path / "schedule.yaml"
    path.write_text(
        "participants:\n"
        "  alice:\n"
        "    - '[2022-01-03 10, 2022-01-03 12)'\n"
        "  bob:\n"
        "    - '[2022-01-03 14, 2022-01-03 15)'\n",
        encoding="utf-8",
    )
    return path


class TestCli:
    """Tests for the timeperiods commands."""

    def test_show(self, config_path):
        """Test describing a single period."""
        result = runner.invoke(app, ["show", "[2022-01-01, 2022-01-31)", "-c", str(config_path)])

        assert result.exit_code == 0
        assert "[2022-01-01,2022-01-31)" in result.output
        assert "30 day(s)" in result.output

    def test_show_with_configured_defaults(self, tmp_path):
        """Test that a bare START,END pair uses the configured precision and boundaries."""
        path = tmp_path / "timeperiods.yaml"
        path.write_text("defaults:\n  precision: month\n  boundaries: '[)'\n", encoding="utf-8")

        result = runner.invoke(app, ["show", "2022-01,2022-04", "-c", str(path)])

        assert result.exit_code == 0
        assert "3 month(s)" in result.output

    def test_subtract(self, config_path):
        """Test the remainder of a period."""
        result = runner.invoke(
            app,
            ["subtract", "[2022-01-01, 2022-01-31]", "[2022-01-10, 2022-01-15]", "-c", str(config_path)],
        )

        assert result.exit_code == 0
        assert "[2022-01-01,2022-01-09]" in result.output
        assert "[2022-01-16,2022-01-31]" in result.output

    def test_overlap(self, config_path):
        """Test the shared part of periods."""
        result = runner.invoke(
            app,
            ["overlap", "[2022-01-01, 2022-01-20]", "[2022-01-10, 2022-01-31]", "-c", str(config_path)],
        )

        assert result.exit_code == 0
        assert "[2022-01-10,2022-01-20]" in result.output

    def test_overlap_none(self, config_path):
        """Test the notice for disjoint periods."""
        result = runner.invoke(
            app,
            ["overlap", "[2022-01-01, 2022-01-05]", "[2022-01-10, 2022-01-31]", "-c", str(config_path)],
        )

        assert result.exit_code == 0
        assert "no periods" in result.output

    def test_gaps(self, config_path):
        """Test the gaps between periods."""
        result = runner.invoke(
            app,
            [
                "gaps",
                "[2022-01-01, 2022-01-05]",
                "[2022-01-10, 2022-01-15]",
                "[2022-01-20, 2022-01-31]",
                "-c",
                str(config_path),
            ],
        )

        assert result.exit_code == 0
        assert "[2022-01-06,2022-01-09]" in result.output
        assert "[2022-01-16,2022-01-19]" in result.output

    def test_mixed_precision_fails(self, config_path):
        """Test that comparing day and hour periods exits with an error."""
        result = runner.invoke(
            app,
            ["overlap", "[2022-01-01, 2022-01-31]", "[2022-01-01 10, 2022-01-01 12]", "-c", str(config_path)],
        )

        assert result.exit_code == 1
        assert "Cannot compare" in result.output

    def test_invalid_period_fails(self, config_path):
        """Test that unparsable input exits with an error."""
        result = runner.invoke(app, ["show", "[yesterday, today]", "-c", str(config_path)])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_free(self, config_path, schedule_path):
        """Test finding common free periods from a schedule file."""
        result = runner.invoke(
            app,
            [
                "free",
                str(schedule_path),
                "--window",
                "[2022-01-03 09, 2022-01-03 17)",
                "--min-length",
                "2",
                "-c",
                str(config_path),
            ],
        )

        assert result.exit_code == 0
        assert "[2022-01-03 12,2022-01-03 13]" in result.output
        assert "[2022-01-03 15,2022-01-03 16]" in result.output
        assert "[2022-01-03 09,2022-01-03 09]" not in result.output

    def test_free_missing_schedule(self, config_path, tmp_path):
        """Test that a missing schedule file exits with an error."""
        result = runner.invoke(
            app,
            ["free", str(tmp_path / "missing.yaml"), "-w", "[2022-01-03 09, 2022-01-03 17)", "-c", str(config_path)],
        )

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_version(self):
        """Test the version command."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output
