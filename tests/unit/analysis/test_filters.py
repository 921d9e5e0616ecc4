"""Unit tests for asset filtering and shares."""

import re

from bundlesight.analysis.filters import (
    breakdown,
    filter_assets,
    parse_exclude_patterns,
    with_percentages,
)
from bundlesight.core.types import Asset


def _assets(*pairs):
    return [Asset(name=name, size=size) for name, size in pairs]


class TestParseExcludePatterns:
    def test_empty(self):
        assert parse_exclude_patterns("") == []
        assert parse_exclude_patterns(None) == []

    def test_substrings_and_regexes(self):
        patterns = parse_exclude_patterns(" .map , /\\.css$/ ,, vendor")
        assert patterns[0] == ".map"
        assert isinstance(patterns[1], re.Pattern)
        assert patterns[1].pattern == "\\.css$"
        assert patterns[2] == "vendor"

    def test_invalid_regex_dropped(self, caplog):
        with caplog.at_level("WARNING"):
            patterns = parse_exclude_patterns("/([/,ok")
        assert patterns == ["ok"]
        assert "Invalid regex" in caplog.text


class TestFilterAssets:
    def test_min_size(self):
        assets = _assets(("a.js", 2048), ("b.js", 100), ("c.js", None))
        assert [a.name for a in filter_assets(assets, 1024)] == ["a.js"]

    def test_exclusions(self):
        assets = _assets(("main.js", 10), ("main.js.map", 10), ("style.css", 10))
        patterns = parse_exclude_patterns(".map,/\\.css$/")
        assert [a.name for a in filter_assets(assets, 0, patterns)] == ["main.js"]

    def test_lone_slash_is_an_empty_regex(self):
        patterns = parse_exclude_patterns("/")
        assert isinstance(patterns[0], re.Pattern)
        assert patterns[0].pattern == ""
        assert filter_assets(_assets(("main.js", 10), ("a.css", 10)), 0, patterns) == []


class TestPercentages:
    def test_shares(self):
        result = with_percentages(_assets(("a.js", 750), ("b.js", 250)))
        assert result.total_size == 1000
        assert [s.percentage for s in result.assets] == [75.0, 25.0]

    def test_zero_total(self):
        result = with_percentages(_assets(("a.js", 0), ("b.js", None)))
        assert [s.percentage for s in result.assets] == [0.0, 0.0]

    def test_rounded_to_one_decimal(self):
        result = with_percentages(_assets(("a.js", 1), ("b.js", 2)))
        assert [s.percentage for s in result.assets] == [33.3, 66.7]

    def test_breakdown_counts_hidden(self):
        result = breakdown(_assets(("a.js", 5000), ("b.js", 10)), min_size_bytes=1024)
        assert [s.name for s in result.assets] == ["a.js"]
        assert result.assets[0].percentage == 100.0
        assert result.hidden_count == 1
