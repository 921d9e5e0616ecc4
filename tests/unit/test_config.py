"""Unit tests for configuration loading."""

import pytest

from bundlesight.config import DEFAULT_MIN_SIZE_KB, ViewerConfig, load_config
from bundlesight.core.exceptions import ConfigError


class TestLoadConfig:
    def test_defaults_when_no_file(self, tmp_path):
        config = load_config(root=tmp_path)
        assert config.min_size_kb == DEFAULT_MIN_SIZE_KB
        assert config.exclude_patterns == []

    def test_discovers_default_file(self, tmp_path):
        (tmp_path / ".bundlesight.yaml").write_text(
            "min_size_kb: 4\nexclude_patterns:\n  - .map\n  - /\\.css$/\ntop: 3\n"
        )
        config = load_config(root=tmp_path)
        assert config.min_size_kb == 4
        assert config.min_size_bytes == 4096
        assert config.exclude_patterns == [".map", "/\\.css$/"]
        assert config.top == 3

    def test_comma_separated_patterns(self, tmp_path):
        f = tmp_path / "custom.yaml"
        f.write_text("exclude_patterns: '.map, vendor'\n")
        config = load_config(f)
        assert config.exclude_patterns == [".map", "vendor"]
        assert config.exclude_string == ".map,vendor"

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        f = tmp_path / "bad.yaml"
        f.write_text("min_size_kb: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(f)

    def test_invalid_values(self, tmp_path):
        f = tmp_path / "bad.yaml"
        f.write_text("min_size_kb: -3\n")
        with pytest.raises(ConfigError):
            load_config(f)

    def test_non_mapping(self, tmp_path):
        f = tmp_path / "list.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            load_config(f)

    def test_empty_file_is_defaults(self, tmp_path):
        f = tmp_path / "empty.yaml"
        f.write_text("")
        assert load_config(f) == ViewerConfig()
