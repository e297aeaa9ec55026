"""Water distributors - share the generated water amongst players."""

import logging
import math
from typing import Dict

from src.configuration.config_source import ConfigSource
from src.rules_engine.config import GENERATION_PRECISION
from src.rules_engine.models import GameContext

logger = logging.getLogger(__name__)


class WaterDistributor:
    """Base contract for water distributors.

    :meth:`allocate` returns the water each player receives this round,
    keyed by ``player_id``. Players are never mutated; the caller applies
    the allocation.
    """

    def allocate(self, water: int, context: GameContext) -> Dict[str, int]:
        raise NotImplementedError

    def update_configuration(self, config_source: ConfigSource):
        """Reload any tunables. The base distributor has none."""


class FairWaterDistributor(WaterDistributor):
    """Give each player water in proportion to their entitlement.

    Total entitlement is every player's entitlement plus the initial water
    rights of the buy points. When the generated water covers it, every
    player gets their full entitlement; otherwise each gets the same share::

        share = min(1, water / total_entitlement)
        player_water = ceil(player.water_entitlement * share)

    Water covering buy-point rights is not handed to any player.
    """

    def allocate(self, water: int, context: GameContext) -> Dict[str, int]:
        total_entitlement = (
            context.total_water_entitlement() + context.total_initial_water_rights()
        )
        if total_entitlement <= 0:
            return {player_id: 0 for player_id in context.players}

        share = min(1.0, water / total_entitlement)

        allocation = {
            player_id: math.ceil(round(player.water_entitlement * share, GENERATION_PRECISION))
            for player_id, player in context.players.items()
        }

        logger.debug(
            "Distributed %d water at share %.3f of %d total entitlement",
            water, share, total_entitlement,
        )
        return allocation
