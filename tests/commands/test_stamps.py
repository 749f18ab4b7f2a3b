"""Tests for the stamps command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from passctl.cli import cli


def _draft() -> dict:
    return json.loads(Path("pass-draft.json").read_text(encoding="utf-8"))


@pytest.mark.usefixtures("_isolated_project")
class TestStampsCommands:
    def test_set_only_writes_config(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["new"])
        result = cli_runner.invoke(cli, ["stamps", "set", "--current", "4", "--total", "8"])
        assert result.exit_code == 0
        draft = _draft()
        assert draft["stamp_config"]["current"] == 4
        assert draft["stamp_config"]["total"] == 8
        assert draft["fields"]["primaryFields"][0]["value"] == "0 von 10"

    def test_set_with_apply(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["new"])
        result = cli_runner.invoke(
            cli, ["stamps", "set", "--current", "2", "--total", "4", "--apply"]
        )
        assert result.exit_code == 0
        fields = _draft()["fields"]
        assert fields["primaryFields"][0]["value"] == "2 von 4"
        assert fields["auxiliaryFields"][0]["value"] == "🟢 🟢 ⚪ ⚪"

    def test_apply_event_ticket(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["new", "stempelkarte_v2"])
        cli_runner.invoke(cli, ["stamps", "set", "--current", "5", "--icon", "☕"])
        result = cli_runner.invoke(cli, ["--json", "stamps", "apply"])
        assert json.loads(result.output)["data"]["changed"] is True
        fields = _draft()["fields"]
        assert fields["primaryFields"][0]["value"] == "5 / 10"
        assert fields["auxiliaryFields"][0]["value"].startswith("☕ ☕ ☕ ☕ ☕ ⚪")

    def test_unsupported_style(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["new", "gutschein"])
        result = cli_runner.invoke(cli, ["--json", "stamps", "apply"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "STAMPS_UNSUPPORTED"
