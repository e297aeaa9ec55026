"""Tests for round-indexed series and the typed series map."""

import pytest

from src.rules_engine.models import AssetType
from src.rules_engine.series import Series, TypedSeriesMap, lookup


# ── Series ───────────────────────────────────────────────────────────

class TestSeriesLookup:
    def test_returns_stored_value(self):
        series = Series([0, 0.9, 1.2])
        assert series.lookup(1) == 0.9
        assert series.lookup(2) == 1.2

    def test_round_zero_is_addressable(self):
        assert Series([0.4, 0.9]).lookup(0) == 0.4

    @pytest.mark.parametrize("round_number", [3, 4, 100])
    def test_beyond_end_is_neutral(self, round_number):
        assert Series([0, 0.9, 1.2]).lookup(round_number) == 1.0

    def test_negative_round_is_neutral(self):
        assert Series([0.5, 0.5]).lookup(-1) == 1.0

    def test_missing_slot_is_neutral(self):
        series = Series([0, None, 1.2])
        assert series.lookup(1) == 1.0
        assert series.lookup(2) == 1.2

    def test_neutral_series_is_always_one(self):
        series = Series.neutral()
        assert len(series) == 0
        assert all(series.lookup(r) == 1.0 for r in range(5))

    def test_zero_deviation_is_kept(self):
        # 0.0 is data, not a missing slot
        assert Series([0.0, 0.0]).lookup(1) == 0.0

    def test_values_are_floats(self):
        assert Series([1, 2]).values() == [1.0, 2.0]

    def test_is_immutable_copy_of_input(self):
        values = [0, 0.9]
        series = Series(values)
        values[1] = 5.0
        assert series.lookup(1) == 0.9

    def test_equality(self):
        assert Series([0, 0.9]) == Series([0.0, 0.9])
        assert Series([0, 0.9]) != Series([0, 1.0])


class TestModuleLookup:
    def test_missing_series_is_neutral(self):
        assert lookup(None, 1) == 1.0

    def test_delegates_to_series(self):
        assert lookup(Series([0, 0.7]), 1) == 0.7


# ── TypedSeriesMap ───────────────────────────────────────────────────

def _make_map():
    return TypedSeriesMap({
        AssetType.FACTORY: {
            1: Series([0, 0.5]),
            2: Series([0, 0.6]),
        },
    })


class TestTypedSeriesMap:
    def test_lookup_present(self):
        assert _make_map().lookup(AssetType.FACTORY, 1, 1) == 0.5
        assert _make_map().lookup(AssetType.FACTORY, 2, 1) == 0.6

    def test_unknown_type_is_neutral(self):
        assert _make_map().lookup(AssetType.CROPS, 1, 1) == 1.0

    def test_missing_level_is_neutral(self):
        assert _make_map().lookup(AssetType.FACTORY, 3, 1) == 1.0

    def test_round_out_of_range_is_neutral(self):
        assert _make_map().lookup(AssetType.FACTORY, 1, 2) == 1.0

    def test_get_returns_none_when_absent(self):
        assert _make_map().get(AssetType.HOUSES, 1) is None
        assert _make_map().get(AssetType.FACTORY, 1) == Series([0, 0.5])

    def test_introspection(self):
        typed = _make_map()
        assert AssetType.FACTORY in typed
        assert AssetType.HOUSES not in typed
        assert len(typed) == 1
        assert typed.asset_types() == [AssetType.FACTORY]
        assert typed.levels(AssetType.FACTORY) == [1, 2]
        assert typed.levels(AssetType.CROPS) == []

    def test_empty_map_is_neutral_everywhere(self):
        typed = TypedSeriesMap()
        assert len(typed) == 0
        assert typed.lookup(AssetType.HOUSES, 2, 1) == 1.0

    def test_input_mapping_is_copied(self):
        levels = {1: Series([0, 0.5])}
        typed = TypedSeriesMap({AssetType.FACTORY: levels})
        levels[1] = Series([0, 3.0])
        assert typed.lookup(AssetType.FACTORY, 1, 1) == 0.5
