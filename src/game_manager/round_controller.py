"""Round controller - runs the rules engine once per round and applies results."""

import copy
import logging
from typing import Dict, Optional

from src.configuration.config_source import ConfigSource
from src.configuration.series_loader import load_total_rounds
from src.game_manager.round_history import RoundHistory, RoundOutcome
from src.game_manager.round_manager import RoundManager
from src.rules_engine.distributors import (
    AllocationError,
    EconomicDistributor,
    SimpleEconomicDistributor,
)
from src.rules_engine.forecasters import SimpleEconomicForecaster, SimpleWaterForecaster
from src.rules_engine.generators import SeriesEconomicGenerator, SeriesWaterGenerator
from src.rules_engine.models import Forecast, GameContext
from src.rules_engine.water_distributors import FairWaterDistributor, WaterDistributor

logger = logging.getLogger(__name__)

# Rules components that read configuration, by attribute name
COMPONENTS = (
    "water_generator",
    "economic_generator",
    "distributor",
    "water_distributor",
    "water_forecaster",
    "economic_forecaster",
)


class RoundController:
    """Main controller for round orchestration.

    Coordinates the forecasters (before players decide), the generators
    and distributors (after players decide), and the RoundManager (round
    progression). Rules components are injectable so variants can be
    swapped in.

    Creating a controller leaves ``context.current_round`` as it is; call
    :meth:`start` to move to round 1.

    Configure once before a round begins; reconfiguring in the middle of a
    round is unsupported.
    """

    def __init__(
        self,
        context: GameContext,
        water_generator: Optional[SeriesWaterGenerator] = None,
        economic_generator: Optional[SeriesEconomicGenerator] = None,
        distributor: Optional[EconomicDistributor] = None,
        water_forecaster: Optional[SimpleWaterForecaster] = None,
        economic_forecaster: Optional[SimpleEconomicForecaster] = None,
        water_distributor: Optional[WaterDistributor] = None,
    ):
        self.context = context
        self.water_generator = water_generator or SeriesWaterGenerator()
        self.economic_generator = economic_generator or SeriesEconomicGenerator()
        self.distributor = distributor or SimpleEconomicDistributor()
        self.water_distributor = water_distributor or FairWaterDistributor()
        self.water_forecaster = water_forecaster or SimpleWaterForecaster()
        self.economic_forecaster = economic_forecaster or SimpleEconomicForecaster()
        self.round_manager = RoundManager(context)
        self.history = RoundHistory()

    def configure(self, config_source: ConfigSource):
        """Push configuration to every rules component, all or nothing.

        Each component is configured on a copy. The copies and the round
        count replace the live settings only once every component has
        accepted the configuration.

        Raises:
            ConfigurationError: If any component rejects the configuration.
                Every component and ``total_rounds`` keep their previous
                settings.
        """
        total_rounds = load_total_rounds(config_source)

        staged = {}
        for name in COMPONENTS:
            component = copy.copy(getattr(self, name))
            component.update_configuration(config_source)
            staged[name] = component

        for name, component in staged.items():
            setattr(self, name, component)
        self.round_manager.set_total_rounds(total_rounds)

        logger.info("Game %s configured", self.context.game_id)

    def start(self):
        self.round_manager.start()

    def forecast_round(self) -> Forecast:
        """Forecast the current round and publish it on the context."""
        forecast = Forecast(
            water=self.water_forecaster.forecast(self.context),
            economic=self.economic_forecaster.forecast(self.context),
        )
        self.context.forecast = forecast

        logger.info(
            "Round %d forecast: water %s", self.context.current_round, forecast.water
        )
        return forecast

    def allocate_round(self) -> RoundOutcome:
        """Realize water and revenue for the current round.

        Results are applied to the context: the water pool, each player's
        ``water``, the prevailing economic conditions and each asset's
        ``revenue_this_turn``. Assets with no matching economic conditions
        or no revenue for their level are reported as faults and left
        unallocated; the rest of the round proceeds.

        Returns:
            The RoundOutcome, also recorded in :attr:`history`.
        """
        round_number = self.context.current_round

        conditions = self.economic_generator.generate(self.context)
        water = self.water_generator.generate(self.context)
        water_allocated = self.water_distributor.allocate(water, self.context)

        faults = []
        try:
            revenues = self.distributor.allocate_all(conditions, self.context.assets.values())
        except AllocationError as e:
            revenues = e.partial
            faults = e.faults
            for fault in faults:
                logger.warning("Round %d allocation fault: %s", round_number, fault)

        self._apply(water, water_allocated, conditions, revenues)

        outcome = RoundOutcome(
            round=round_number,
            water_generated=water,
            economic_conditions=conditions,
            revenues=revenues,
            forecast=self.context.forecast,
            faults=faults,
            water_allocated=water_allocated,
        )
        self.history.record(outcome)

        logger.info(
            "Round %d: generated %d water over %d buy points, allocated %d revenue to %d assets",
            round_number,
            water,
            len(self.context.buy_points),
            outcome.total_revenue,
            len(revenues),
        )
        return outcome

    def end_round(self) -> bool:
        """Advance to the next round. Returns True when the game has ended."""
        return self.round_manager.end_round()

    def play_round(self) -> RoundOutcome:
        """Forecast, allocate and end the current round."""
        self.forecast_round()
        outcome = self.allocate_round()
        self.end_round()
        return outcome

    @property
    def is_game_ended(self) -> bool:
        return self.round_manager.game_ended

    def _apply(self, water: int, water_allocated: Dict[str, int], conditions, revenues: Dict[str, int]):
        self.context.water_pool = water
        for player_id, player_water in water_allocated.items():
            self.context.players[player_id].water = player_water
        self.context.economic_conditions = conditions
        for asset_id, revenue in revenues.items():
            self.context.assets[asset_id].revenue_this_turn = revenue
