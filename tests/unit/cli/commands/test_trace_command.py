"""Unit tests for the 'trace' command."""

import json

from click.testing import CliRunner

from bundlesight.cli.commands.trace import trace


class TestTraceCommand:
    def test_chain_json(self, stats_file):
        result = CliRunner().invoke(trace, [stats_file, "3", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert [m["id"] for m in data["chain"]] == [1, 2, 3]
        assert data["depth"] == 2
        assert data["transitive_dependents"] == 0

    def test_chain_text(self, stats_file):
        result = CliRunner().invoke(trace, [stats_file, "/app/src/index.js"])

        assert result.exit_code == 0
        assert "Import Chain" in result.output
        assert "this is an entry module" in result.output
        assert "Pulls in 2 module(s)" in result.output

    def test_unknown_module_fails(self, stats_file):
        result = CliRunner().invoke(trace, [stats_file, "./src/ghost.js", "--json"])

        assert result.exit_code == 1
        envelope = json.loads(result.stdout)
        assert envelope["error"]["type"] == "ModuleNotFoundInReport"
