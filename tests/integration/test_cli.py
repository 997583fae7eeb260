"""Integration tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestCalculateCommand:
    """Test the calculate command."""

    def test_default_layout(self, runner: CliRunner) -> None:
        """Test the default 8x10 landscape, 3:2 summary."""
        result = runner.invoke(cli, ["calculate"])
        assert result.exit_code == 0, result.output
        assert "Paper:  10 x 8 in" in result.output
        assert "Print:  9.000 x 6.000 in" in result.output
        assert "Easel:  8x10" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        """Test machine-readable output with an offset."""
        result = runner.invoke(cli, ["calculate", "--offset-v", "0.25", "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["top_border"] == pytest.approx(1.25)
        assert data["bottom_border"] == pytest.approx(0.75)
        assert data["offset_warning"] is None

    def test_portrait_custom_paper(self, runner: CliRunner) -> None:
        """Test custom paper placed in a larger easel."""
        result = runner.invoke(
            cli,
            ["calculate", "--paper", "custom", "--paper-width", "9", "--paper-height", "12"],
        )
        assert result.exit_code == 0, result.output
        assert "Easel:  11x14 (non-standard paper)" in result.output

    def test_warnings_listed(self, runner: CliRunner) -> None:
        """Test that warnings are printed after the readings."""
        result = runner.invoke(cli, ["calculate", "--min-border", "5"])
        assert result.exit_code == 0, result.output
        assert "⚠ Minimum border too large; using 0.5." in result.output

    def test_custom_paper_requires_dimensions(self, runner: CliRunner) -> None:
        """Test that custom paper without dimensions is a usage error."""
        result = runner.invoke(cli, ["calculate", "--paper", "custom"])
        assert result.exit_code == 2
        assert "--paper-width" in result.output

    def test_non_positive_custom_ratio(self, runner: CliRunner) -> None:
        """Test that a zero custom ratio component is rejected."""
        result = runner.invoke(
            cli,
            ["calculate", "--ratio", "custom", "--ratio-width", "3", "--ratio-height", "0"],
        )
        assert result.exit_code == 2

    def test_unknown_paper_rejected(self, runner: CliRunner) -> None:
        """Test that unknown paper keys are rejected by the option."""
        result = runner.invoke(cli, ["calculate", "--paper", "legal"])
        assert result.exit_code == 2


class TestOptimizeCommand:
    """Test the optimize command."""

    def test_optimal_border(self, runner: CliRunner) -> None:
        """Test that 10x8 at 3:2 from 0.6in snaps to 0.5in."""
        result = runner.invoke(cli, ["optimize", "--min-border", "0.6"])
        assert result.exit_code == 0, result.output
        assert "Optimal minimum border: 0.50 in" in result.output
        assert "left/right 0.500 in, top/bottom 1.000 in" in result.output


class TestEaselsCommand:
    """Test the easels command."""

    def test_lists_catalog(self, runner: CliRunner) -> None:
        """Test that every standard easel is listed."""
        result = runner.invoke(cli, ["easels"])
        assert result.exit_code == 0
        assert "8 x 10 in" in result.output
        assert "20 x 24 in" in result.output
        assert len(result.output.strip().splitlines()) == 7
