"""Tests for the location command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from passctl.cli import cli


def _relevance() -> dict:
    return json.loads(Path("pass-draft.json").read_text(encoding="utf-8"))["relevance"]


@pytest.mark.usefixtures("_isolated_project")
class TestLocationCommands:
    @pytest.fixture(autouse=True)
    def _store_card(self, cli_runner: CliRunner, _isolated_project: None) -> None:
        cli_runner.invoke(cli, ["new"])

    def test_add(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["location", "add", "53.5511", "9.9937", "--text", "Gleich um die Ecke"]
        )
        assert result.exit_code == 0, result.output
        assert _relevance()["locations"] == [
            {"latitude": 53.5511, "longitude": 9.9937, "relevant_text": "Gleich um die Ecke"}
        ]

    def test_add_negative_coordinates(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["location", "add", "--", "-33.8688", "151.2093"])
        assert result.exit_code == 0, result.output
        assert _relevance()["locations"][0]["latitude"] == -33.8688

    def test_add_out_of_range_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["location", "add", "91", "0"])
        assert result.exit_code == 2
        assert _relevance()["locations"] == []

    def test_eleventh_location_declined(self, cli_runner: CliRunner) -> None:
        for n in range(10):
            cli_runner.invoke(cli, ["location", "add", str(n), "0"])
        result = cli_runner.invoke(cli, ["--json", "location", "add", "50", "8"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["changed"] is False
        assert len(_relevance()["locations"]) == 10

    def test_remove(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["location", "add", "1", "2"])
        result = cli_runner.invoke(cli, ["location", "remove", "0"])
        assert result.exit_code == 0
        assert _relevance()["locations"] == []

    def test_set_and_clear(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["location", "set", "--date", "2026-12-24T18:00:00+01:00", "--max-distance", "150"]
        )
        assert result.exit_code == 0, result.output
        assert _relevance()["max_distance"] == 150
        cli_runner.invoke(cli, ["location", "set", "--date", "", "--max-distance", "0"])
        relevance = _relevance()
        assert relevance["relevant_date"] is None
        assert relevance["max_distance"] is None

    def test_set_requires_changes(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["location", "set"])
        assert result.exit_code == 1
        assert "No changes specified" in result.output

    def test_show_lists_locations(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["location", "add", "53.5", "10.0", "--text", "Nord"])
        result = cli_runner.invoke(cli, ["show"])
        assert result.exit_code == 0
        assert 'location 0: 53.5, 10.0 "Nord"' in result.output
