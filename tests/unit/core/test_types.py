"""Unit tests for core types and helpers."""

import pytest

from bundlesight.core.result import Err, Ok
from bundlesight.core.types import Module, id_key, size_for_ordering, sorted_by_size


class TestIdKey:
    @pytest.mark.parametrize("value,expected", [
        (1, "1"),
        ("1", "1"),
        (1.0, "1"),
        ("./a.js", "./a.js"),
        (None, None),
    ])
    def test_canonical_form(self, value, expected):
        assert id_key(value) == expected


class TestSizes:
    @pytest.mark.parametrize("value,expected", [
        (10, 10),
        (2.5, 2.5),
        (None, 0),
        ("12", 0),
        (True, 0),
        (float("nan"), 0),
        (float("-inf"), 0),
    ])
    def test_size_for_ordering(self, value, expected):
        assert size_for_ordering(value) == expected

    def test_sorted_by_size_is_stable(self):
        modules = [Module(id=i, size=s) for i, s in enumerate([1, 5, None, 5])]
        assert [m.id for m in sorted_by_size(modules)] == [1, 3, 0, 2]


class TestModuleModel:
    def test_aliases(self):
        module = Module.model_validate({"id": 2, "issuerId": 1, "issuerName": "./a.js"})
        assert module.issuer_id == 1
        assert module.issuer_name == "./a.js"

    def test_non_numeric_size_is_dropped(self):
        assert Module.model_validate({"size": "big"}).size is None

    def test_string_concatenated_entries(self):
        module = Module.model_validate({"identifier": "concat", "modules": ["m1", "m2"]})
        assert module.is_concatenated
        assert [m.identifier for m in module.modules] == ["m1", "m2"]

    def test_display_name_fallbacks(self):
        assert Module(name="./a.js", identifier="/abs/a.js").display_name == "./a.js"
        assert Module(identifier="/abs/a.js").display_name == "/abs/a.js"
        assert Module(id=3).display_name == "3"


class TestResult:
    def test_ok_and_err(self):
        assert Ok(1).unwrap() == 1
        assert Err("boom").unwrap_err() == "boom"
        with pytest.raises(ValueError):
            Err("boom").unwrap()
        with pytest.raises(ValueError):
            Ok(1).unwrap_err()

    def test_map(self):
        assert Ok(2).map(lambda v: v * 2) == Ok(4)
        assert Err("x").map(lambda v: v * 2) == Err("x")
