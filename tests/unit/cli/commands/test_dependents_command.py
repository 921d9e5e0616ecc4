"""Unit tests for the 'dependents' command."""

import json

from click.testing import CliRunner

from bundlesight.cli.commands.dependents import dependents


class TestDependentsCommand:
    def test_by_id(self, stats_file):
        result = CliRunner().invoke(dependents, [stats_file, "1", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["via"] == "issuer"
        assert data["target"]["identifier"] == "/app/src/index.js"
        assert [m["name"] for m in data["dependents"]] == ["./src/b.js"]

    def test_by_path_like_name(self, stats_file):
        result = CliRunner().invoke(dependents, [stats_file, "./src/b.js"])

        assert result.exit_code == 0
        assert "Imported by ./src/b.js" in result.output
        assert "./node_modules/lib/index.js" in result.output

    def test_unknown_module(self, stats_file):
        result = CliRunner().invoke(dependents, [stats_file, "./src/nope.js"])

        assert result.exit_code == 0
        assert "Module not found: ./src/nope.js" in result.output

    def test_unknown_module_json(self, stats_file):
        result = CliRunner().invoke(dependents, [stats_file, "nope", "--json"])

        data = json.loads(result.stdout)["data"]
        assert data["target"] is None
        assert data["count"] == 0
