"""
Unit tests for CLI commands.

Tests cover:
- weights command
- sample command
- shrink command
"""

import textwrap

import pytest
from typer.testing import CliRunner

from proptree.cli.app import app
from proptree.io.loaders.config_loader import SEED_ENV_VAR

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    """Run every command from an empty directory without env overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(SEED_ENV_VAR, raising=False)


class TestWeightsCommand:
    def test_weights_half(self):
        result = runner.invoke(app, ["weights", "--probability", "0.5"])

        assert result.exit_code == 0
        assert "Branch weights" in result.stdout
        assert "absent" in result.stdout
        assert "present" in result.stdout

    @pytest.mark.parametrize("probability", ["0", "1", "1.5", "-0.1"])
    def test_weights_invalid(self, probability):
        result = runner.invoke(app, ["weights", "--probability", probability])

        assert result.exit_code == 1
        assert "Invalid probability" in result.stdout

    def test_weights_short_option_accepts_negative(self):
        result = runner.invoke(app, ["weights", "-p", "-0.25"])

        assert result.exit_code == 1
        assert "Invalid probability" in result.stdout


class TestSampleCommand:
    def test_sample_reports_distribution(self):
        result = runner.invoke(app, ["sample", "--seed", "3", "--count", "200"])

        assert result.exit_code == 0
        assert "Seed: 3" in result.stdout
        assert "Distribution over 200" in result.stdout

    def test_sample_uses_config_seed(self, tmp_path):
        (tmp_path / "proptree.yaml").write_text(
            textwrap.dedent(
                """
                runner:
                  seed: 1234
                """
            ),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["sample", "--count", "10"])

        assert result.exit_code == 0
        assert "Seed: 1234" in result.stdout

    def test_sample_same_seed_same_output(self):
        first = runner.invoke(app, ["sample", "--seed", "5", "--count", "50"])
        second = runner.invoke(app, ["sample", "--seed", "5", "--count", "50"])

        assert first.stdout == second.stdout

    def test_sample_empty_range(self):
        result = runner.invoke(app, ["sample", "--start", "5", "--end", "5"])

        assert result.exit_code == 2
        assert "Invalid range" in result.stdout

    def test_sample_bad_config(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("runner:\n  cases: -1\n", encoding="utf-8")
        result = runner.invoke(app, ["sample", "--config", str(bad)])

        assert result.exit_code == 1
        assert "Failed to load config" in result.stdout


class TestShrinkCommand:
    def test_shrink_finds_boundary(self):
        result = runner.invoke(app, ["shrink", "--seed", "1", "--threshold", "500"])

        assert result.exit_code == 1
        assert "Falsified" in result.stdout
        assert "Minimal: 500" in result.stdout

    def test_shrink_trace(self):
        result = runner.invoke(app, ["shrink", "--seed", "1", "--trace"])

        assert result.exit_code == 1
        assert "Shrink trace" in result.stdout
        assert "None" in result.stdout

    def test_shrink_passing_property(self):
        result = runner.invoke(app, ["shrink", "--seed", "1", "--threshold", "1000"])

        assert result.exit_code == 0
        assert "No failing case" in result.stdout
