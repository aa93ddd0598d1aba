"""
Tests for the command line interface.
"""

import pytest
from click.testing import CliRunner

from taxcheckdigit.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:

    def test_calculate(self, runner):
        result = runner.invoke(cli, ["calculate", "DE", "0247629135"])
        assert result.exit_code == 0
        assert result.output.strip() == "8\t02476291358"

    def test_calculate_french_key_leads(self, runner):
        result = runner.invoke(cli, ["calculate", "fr", "404833048"])
        assert result.exit_code == 0
        assert result.output.strip() == "83\t83404833048"

    def test_calculate_error(self, runner):
        result = runner.invoke(cli, ["calculate", "DE", "0123456789"])
        assert result.exit_code == 1
        assert "no digit repeated" in result.output

    def test_validate(self, runner):
        result = runner.invoke(cli, ["validate", "HU", "21376414", "12892312"])
        assert result.exit_code == 0
        assert "21376414\tvalid" in result.output

    def test_validate_invalid(self, runner):
        result = runner.invoke(cli, ["validate", "PT", "501964843", "501964842"])
        assert result.exit_code == 1
        assert "501964842\tinvalid" in result.output

    def test_unknown_country(self, runner):
        result = runner.invoke(cli, ["validate", "XX", "123"])
        assert result.exit_code == 2
        assert "unsupported country" in result.output

    def test_countries(self, runner):
        result = runner.invoke(cli, ["--log-level", "info", "countries"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert [line.split("\t")[0] for line in lines] == ["DE", "EL", "FR", "HU", "PT"]
