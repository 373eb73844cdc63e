"""
Tests for shared helper functions.
"""

import pytest

from shared.utils.helpers import get_path, is_numeric, set_path, to_number


class TestToNumber:

    @pytest.mark.parametrize("value,expected", [
        ("150", 150),
        (" 42 ", 42),
        ("1.5", 1.5),
        ("2.0", 2),
        (7, 7),
        (3.0, 3),
        ("wide", None),
        ("", None),
        (True, None),
        (None, None),
    ])
    def test_conversion(self, value, expected):
        assert to_number(value) == expected

    def test_huge_int_kept_exact(self):
        assert to_number(10 ** 400) == 10 ** 400
        assert to_number("1" * 60) == int("1" * 60)

    def test_integral_results_are_ints(self):
        assert isinstance(to_number("2.0"), int)
        assert isinstance(to_number(10 ** 400), int)


class TestIsNumeric:

    def test_values(self):
        assert is_numeric("12.5")
        assert is_numeric(0)
        assert not is_numeric(False)
        assert not is_numeric("  ")
        assert not is_numeric([1])


class TestPaths:

    def test_get_and_set(self):
        data = {"items": [{"name": "a"}]}

        assert get_path(data, "items.0.name") == "a"
        assert get_path(data, "items.5.name") is None

        set_path(data, "items.0.name", "b")
        set_path(data, "meta.source", "import")

        assert data == {"items": [{"name": "b"}], "meta": {"source": "import"}}
