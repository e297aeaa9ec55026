"""Generators that turn configured series into per-round quantities.

* :class:`SeriesWaterGenerator` - total water delivered this round.
* :class:`UtopianWaterGenerator` and :class:`RandomBelowIdealWaterGenerator` -
  alternative water generators sized per buy point.
* :class:`SeriesEconomicGenerator` - economic conditions for every asset
  type and level this round.

Generators read the game context and return a value; the caller applies
the result to the game. The series generators are also pure.
"""

import logging
import math
import random
from typing import Dict, Optional

from src.configuration.config_source import ConfigSource
from src.configuration.series_loader import (
    load_typed_series,
    load_water_per_parcel,
    load_water_series,
)
from src.rules_engine.config import GENERATION_PRECISION, MAX_LEVEL, MIN_LEVEL
from src.rules_engine.models import ASSET_TYPES, AssetType, GameContext
from src.rules_engine.series import Series, TypedSeriesMap

logger = logging.getLogger(__name__)


class SeriesWaterGenerator:
    """Generate water as a known series of deviations from normal delivery.

    Normal delivery (the baseline) is every player's water entitlement plus
    the initial water rights of every registered buy point. Each round the
    baseline is scaled by that round's deviation::

        water = floor(baseline * deviations[current_round])

    Rounds past the end of the series deliver the baseline unchanged.
    """

    def __init__(self, deviations: Optional[Series] = None):
        self.deviations = deviations if deviations is not None else Series.neutral()

    def generate(self, context: GameContext) -> int:
        baseline = context.total_water_entitlement() + context.total_initial_water_rights()
        ratio = self.deviations.lookup(context.current_round)

        # Round off float noise first so 0.29 * 100 floors to 29, not 28.
        water = math.floor(round(baseline * ratio, GENERATION_PRECISION))

        logger.debug(
            "Round %d water: baseline=%d ratio=%.3f -> %d",
            context.current_round, baseline, ratio, water,
        )
        return water

    def update_configuration(self, config_source: ConfigSource):
        """Replace the deviation series from *config_source*.

        Raises:
            ConfigurationError: If the series is malformed. The previous
                series is kept.
        """
        self.deviations = load_water_series(config_source)
        logger.info("Water generator configured with %d rounds of deviations", len(self.deviations))


class UtopianWaterGenerator:
    """Generate exactly enough water to satisfy every buy point's entitlement."""

    def __init__(self, water_per_parcel: int = 0):
        self.water_per_parcel = water_per_parcel

    def generate(self, context: GameContext) -> int:
        return len(context.buy_points) * self.water_per_parcel

    def update_configuration(self, config_source: ConfigSource):
        self.water_per_parcel = load_water_per_parcel(config_source)


class RandomBelowIdealWaterGenerator:
    """Generate somewhat less water than the ideal amount.

    The ideal is every buy point's entitlement. Each round a random shortfall
    of up to one entitlement per four buy points is taken off it. Pass a
    seeded ``rng`` for repeatable games; unlike the series generators,
    repeated calls draw new shortfalls.
    """

    def __init__(self, water_per_parcel: int = 0, rng: Optional[random.Random] = None):
        self.water_per_parcel = water_per_parcel
        self.rng = rng or random.Random()

    def generate(self, context: GameContext) -> int:
        buy_points = len(context.buy_points)
        ideal = buy_points * self.water_per_parcel
        spread = (buy_points // 4) * self.water_per_parcel
        shortfall = self.rng.randrange(spread) if spread > 0 else 0

        logger.debug(
            "Round %d water: ideal=%d shortfall=%d", context.current_round, ideal, shortfall
        )
        return ideal - shortfall

    def update_configuration(self, config_source: ConfigSource):
        self.water_per_parcel = load_water_per_parcel(config_source)


class SeriesEconomicGenerator:
    """Generate economic conditions as a known series of deviations.

    Produces, for every asset type and every level, the multiplier to apply
    to an asset's normal revenue in the current round. Types or levels with
    no configured series get the neutral multiplier.
    """

    def __init__(self, deviations: Optional[TypedSeriesMap] = None):
        self.deviations = deviations if deviations is not None else TypedSeriesMap()

    def generate(self, context: GameContext) -> Dict[AssetType, Dict[int, float]]:
        conditions: Dict[AssetType, Dict[int, float]] = {}
        for asset_type in ASSET_TYPES:
            conditions[asset_type] = {
                level: self.deviations.lookup(asset_type, level, context.current_round)
                for level in range(MIN_LEVEL, MAX_LEVEL + 1)
            }
        return conditions

    def update_configuration(self, config_source: ConfigSource):
        self.deviations = load_typed_series(config_source)
        logger.info(
            "Economic generator configured for %d asset types", len(self.deviations)
        )
