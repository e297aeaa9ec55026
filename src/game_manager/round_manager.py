"""Round progression for a single game."""

import logging

from src.configuration.config_source import ConfigSource
from src.configuration.series_loader import load_total_rounds
from src.rules_engine.models import GameContext

logger = logging.getLogger(__name__)


class RoundStateError(Exception):
    """Raised when rounds are advanced in an invalid order."""

    pass


class RoundManager:
    """Advances ``current_round`` on a game context.

    Round 0 is the pre-game build round. :meth:`start` moves the game to
    round 1 and :meth:`end_round` advances one round at a time until the
    last round, at which point the game ends.

    Creating a manager does not touch ``current_round``; only :meth:`start`
    and :meth:`reset` do.
    """

    def __init__(self, context: GameContext):
        self.context = context
        self.game_ended = False

    def update_configuration(self, config_source: ConfigSource):
        """Read the number of rounds per game."""
        self.set_total_rounds(load_total_rounds(config_source))

    def set_total_rounds(self, total_rounds: int):
        self.context.total_rounds = total_rounds
        logger.info("Game %s configured for %d rounds", self.context.game_id, total_rounds)

    def start(self):
        """Begin the first playable round."""
        self.context.current_round = 1
        self.game_ended = False
        logger.info("Game %s started", self.context.game_id)

    def reset(self):
        self.context.current_round = 0
        self.game_ended = False

    def end_round(self) -> bool:
        """End the current round.

        Returns:
            True if the game has now ended, False otherwise.

        Raises:
            RoundStateError: If the game has already ended.
        """
        if self.game_ended:
            raise RoundStateError(f"Game {self.context.game_id} has already ended")

        if self.context.is_last_round:
            self.game_ended = True
            logger.info(
                "Game %s ended after round %d", self.context.game_id, self.context.current_round
            )
        else:
            self.context.current_round += 1
            logger.info(
                "Game %s advanced to round %d of %d",
                self.context.game_id, self.context.current_round, self.context.total_rounds,
            )

        return self.game_ended
