"""Unit tests for CLI utilities."""

import json

import click
import pytest

from bundlesight.cli.utils import echo_error, open_stats, viewer_config
from bundlesight.config import ViewerConfig
from bundlesight.core.exceptions import NormalizationError, StatsLoadError


class TestUtils:
    def test_open_stats(self, tmp_path):
        f = tmp_path / "stats.json"
        f.write_text(json.dumps({"assets": [{"name": "a.js", "size": 1}]}))

        stats = open_stats(str(f))
        assert stats.report.assets[0].name == "a.js"

    def test_open_stats_missing(self, tmp_path):
        with pytest.raises(StatsLoadError):
            open_stats(str(tmp_path / "missing.json"))

    def test_open_stats_bad_shape(self, tmp_path):
        f = tmp_path / "stats.json"
        f.write_text(json.dumps({"hello": "world"}))
        with pytest.raises(NormalizationError):
            open_stats(str(f))

    def test_viewer_config_from_context(self):
        config = ViewerConfig(min_size_kb=5)
        ctx = click.Context(click.Command("x"), obj=config)
        assert viewer_config(ctx) is config

    def test_viewer_config_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert viewer_config(None) == ViewerConfig()

    def test_echo_error_goes_to_stderr(self, capsys):
        echo_error("bad things")
        captured = capsys.readouterr()
        assert "bad things" in captured.err
