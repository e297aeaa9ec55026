"""Tests for water and economic forecasters."""

import pytest

from src.rules_engine.forecasters import (
    SimpleEconomicForecaster,
    SimpleWaterForecaster,
    classify_economic,
    classify_water,
)
from src.rules_engine.models import ASSET_TYPES, AssetType, GameContext
from src.rules_engine.series import Series, TypedSeriesMap


# ── Classification boundaries ────────────────────────────────────────

class TestClassifyWater:
    @pytest.mark.parametrize("deviation,label", [
        (2.0, "Normal"),
        (1.0, "Normal"),
        (0.99, "Below Normal"),
        (0.65, "Below Normal"),
        (0.6499, "Drought"),
        (0.0, "Drought"),
    ])
    def test_boundaries(self, deviation, label):
        assert classify_water(deviation) == label


class TestClassifyEconomic:
    @pytest.mark.parametrize("deviation,label", [
        (3.0, "Good"),
        (1.65, "Good"),
        (1.6499, "Normal"),
        (1.0, "Normal"),
        (0.9999, "Below Normal"),
        (0.65, "Below Normal"),
        (0.64, "Recession"),
        (0.0, "Recession"),
    ])
    def test_boundaries(self, deviation, label):
        assert classify_economic(deviation) == label


# ── Water forecaster ─────────────────────────────────────────────────

class TestSimpleWaterForecaster:
    def test_forecasts_current_round(self):
        forecaster = SimpleWaterForecaster(Series([0, 0.9, 1.2, 0.3]))
        ctx = GameContext(game_id="g", current_round=1, total_rounds=4)
        assert forecaster.forecast(ctx) == "Below Normal"
        ctx.current_round = 2
        assert forecaster.forecast(ctx) == "Normal"
        ctx.current_round = 3
        assert forecaster.forecast(ctx) == "Drought"

    def test_missing_data_is_normal(self):
        forecaster = SimpleWaterForecaster(Series([0, 0.3]))
        ctx = GameContext(game_id="g", current_round=5, total_rounds=5)
        assert forecaster.forecast(ctx) == "Normal"

    def test_unconfigured_is_normal(self, context):
        assert SimpleWaterForecaster().forecast(context) == "Normal"

    def test_update_configuration(self, context, config_source):
        forecaster = SimpleWaterForecaster()
        forecaster.update_configuration(config_source)
        assert forecaster.forecast(context) == "Below Normal"

    def test_round_zero_reads_build_round_slot(self):
        # Slot 0 holds the build round; "0" is a real value there
        forecaster = SimpleWaterForecaster(Series([0, 1.0]))
        ctx = GameContext(game_id="g", current_round=0)
        assert forecaster.forecast(ctx) == "Drought"


# ── Economic forecaster ──────────────────────────────────────────────

class TestSimpleEconomicForecaster:
    def test_every_type_and_level_present(self, context):
        forecast = SimpleEconomicForecaster().forecast(context)
        assert list(forecast) == list(ASSET_TYPES)
        for levels in forecast.values():
            assert levels == {1: "Normal", 2: "Normal", 3: "Normal"}

    def test_forecasts_without_any_assets(self, context, config_source):
        assert context.assets == {}
        forecaster = SimpleEconomicForecaster()
        forecaster.update_configuration(config_source)

        forecast = forecaster.forecast(context)
        assert forecast[AssetType.FACTORY] == {1: "Recession", 2: "Recession", 3: "Recession"}
        assert forecast[AssetType.HOUSES] == {1: "Normal", 2: "Normal", 3: "Normal"}
        assert forecast[AssetType.CROPS] == {1: "Normal", 2: "Normal", 3: "Normal"}

    def test_next_round(self, context, config_source):
        forecaster = SimpleEconomicForecaster()
        forecaster.update_configuration(config_source)
        context.current_round = 2

        forecast = forecaster.forecast(context)
        assert forecast[AssetType.FACTORY][1] == "Good"
        assert forecast[AssetType.HOUSES][2] == "Recession"

    def test_per_level_labels(self):
        forecaster = SimpleEconomicForecaster(TypedSeriesMap({
            AssetType.HOUSES: {
                1: Series([0, 0.7]),
                3: Series([0, 1.7]),
            },
        }))
        ctx = GameContext(game_id="g", current_round=1)
        assert forecaster.forecast(ctx)[AssetType.HOUSES] == {
            1: "Below Normal", 2: "Normal", 3: "Good",
        }

    def test_idempotent(self, context, config_source):
        forecaster = SimpleEconomicForecaster()
        forecaster.update_configuration(config_source)
        assert forecaster.forecast(context) == forecaster.forecast(context)
