"""Tests for random arrays and array parsing."""

import pytest

import config
from engine.arrays import clamp_size, parse_array, random_array


class TestRandomArray:
    def test_size_and_range(self):
        values = random_array(100)
        assert len(values) == 100
        assert all(config.MIN_VALUE <= v <= config.MAX_VALUE for v in values)

    def test_seed_is_reproducible(self):
        assert random_array(20, seed=7) == random_array(20, seed=7)

    def test_custom_bounds(self):
        assert set(random_array(30, low=4, high=4)) == {4}


class TestClampSize:
    @pytest.mark.parametrize("given, expected", [(1, 10), (10, 10), (75, 75), (150, 150), (900, 150)])
    def test_clamps(self, given, expected):
        assert clamp_size(given) == expected


class TestParseArray:
    def test_commas(self):
        assert parse_array("5, 3, 8, 1") == [5, 3, 8, 1]

    def test_whitespace_and_negatives(self):
        assert parse_array("  5 -3\n8\t1 ") == [5, -3, 8, 1]

    def test_trailing_comma(self):
        assert parse_array("1,2,") == [1, 2]

    def test_rejects_non_integers(self):
        with pytest.raises(ValueError, match="Not an integer"):
            parse_array("1, two, 3")

    def test_rejects_floats(self):
        with pytest.raises(ValueError):
            parse_array("1.5, 2")

    def test_rejects_empty(self):
        with pytest.raises(ValueError, match="No values"):
            parse_array("  , ")
