"""Forecasters - turn deviation series into player-facing forecast labels.

Forecasts are approximate but always correct: they read the same series
the generators use, for the round about to be played, and bucket the
deviation into a label. Lower bounds are inclusive, so a deviation of
exactly 1.0 is "Normal" and exactly 0.65 is "Below Normal".
"""

import logging
from typing import Dict, Optional, Sequence, Tuple

from src.configuration.config_source import ConfigSource
from src.configuration.series_loader import load_typed_series, load_water_series
from src.rules_engine.config import (
    ECONOMIC_FORECAST_FALLBACK,
    ECONOMIC_FORECAST_THRESHOLDS,
    MAX_LEVEL,
    MIN_LEVEL,
    WATER_FORECAST_FALLBACK,
    WATER_FORECAST_THRESHOLDS,
)
from src.rules_engine.models import ASSET_TYPES, AssetType, GameContext
from src.rules_engine.series import Series, TypedSeriesMap

logger = logging.getLogger(__name__)


def _classify(
    deviation: float,
    thresholds: Sequence[Tuple[float, str]],
    fallback: str,
) -> str:
    for lower_bound, label in thresholds:
        if deviation >= lower_bound:
            return label
    return fallback


def classify_water(deviation: float) -> str:
    return _classify(deviation, WATER_FORECAST_THRESHOLDS, WATER_FORECAST_FALLBACK)


def classify_economic(deviation: float) -> str:
    return _classify(deviation, ECONOMIC_FORECAST_THRESHOLDS, ECONOMIC_FORECAST_FALLBACK)


class SimpleWaterForecaster:
    """Forecast this round's water delivery as Normal / Below Normal / Drought."""

    def __init__(self, deviations: Optional[Series] = None):
        self.deviations = deviations if deviations is not None else Series.neutral()

    def forecast(self, context: GameContext) -> str:
        return classify_water(self.deviations.lookup(context.current_round))

    def update_configuration(self, config_source: ConfigSource):
        self.deviations = load_water_series(config_source)


class SimpleEconomicForecaster:
    """Forecast economic conditions for every asset type and level.

    Every declared asset type is forecast, whether or not any asset of that
    type is in the game.
    """

    def __init__(self, deviations: Optional[TypedSeriesMap] = None):
        self.deviations = deviations if deviations is not None else TypedSeriesMap()

    def forecast(self, context: GameContext) -> Dict[AssetType, Dict[int, str]]:
        forecasts: Dict[AssetType, Dict[int, str]] = {}
        for asset_type in ASSET_TYPES:
            forecasts[asset_type] = {
                level: classify_economic(
                    self.deviations.lookup(asset_type, level, context.current_round)
                )
                for level in range(MIN_LEVEL, MAX_LEVEL + 1)
            }
        return forecasts

    def update_configuration(self, config_source: ConfigSource):
        self.deviations = load_typed_series(config_source)
