"""Unit tests for loading stats files from disk."""

import json

from bundlesight.core.exceptions import NormalizationError, NormalizationErrorKind, StatsLoadError
from bundlesight.core.loader import load_stats, read_stats_file
from bundlesight.core.normalizer import ReportShape


class TestLoader:
    def test_load_valid_file(self, tmp_path):
        f = tmp_path / "stats.json"
        f.write_text(json.dumps({
            "assets": [{"name": "main.js", "size": 10, "chunks": [0]}],
            "modules": [{"id": 0, "identifier": "./index.js", "size": 10, "chunks": [0]}],
        }))

        stats = load_stats(f).unwrap()
        assert stats.path == f.resolve()
        assert stats.shape == ReportShape.SINGLE_BUILD
        assert stats.index.by_id(0).identifier == "./index.js"

    def test_missing_file(self, tmp_path):
        result = load_stats(tmp_path / "missing.json")
        assert result.is_err()
        error = result.unwrap_err()
        assert isinstance(error, StatsLoadError)
        assert "not found" in error.message

    def test_directory_is_rejected(self, tmp_path):
        result = read_stats_file(tmp_path)
        assert result.is_err()

    def test_invalid_json(self, tmp_path):
        f = tmp_path / "stats.json"
        f.write_text("{not json")
        error = load_stats(f).unwrap_err()
        assert isinstance(error, StatsLoadError)
        assert "Error parsing JSON" in error.message

    def test_unusable_document(self, tmp_path):
        f = tmp_path / "stats.json"
        f.write_text("[1, 2, 3]")
        error = load_stats(str(f)).unwrap_err()
        assert isinstance(error, NormalizationError)
        assert error.kind == NormalizationErrorKind.NOT_AN_OBJECT
