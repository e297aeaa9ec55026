from src.game_manager.round_controller import RoundController
from src.game_manager.round_history import RoundHistory, RoundOutcome
from src.game_manager.round_manager import RoundManager, RoundStateError

__all__ = [
    "RoundController",
    "RoundHistory",
    "RoundManager",
    "RoundOutcome",
    "RoundStateError",
]
