"""Data models for the rules engine - game assets, players and round context."""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, List, Optional

from src.rules_engine.config import MAX_LEVEL, MIN_LEVEL


class AssetType(Enum):
    """Categories of productive game asset."""

    FACTORY = "factory"
    HOUSES = "houses"
    CROPS = "crops"


# Iteration order used whenever every asset type must be visited
ASSET_TYPES = (AssetType.FACTORY, AssetType.HOUSES, AssetType.CROPS)


@dataclass
class GameAsset:
    """A productive asset owned by a player.

    ``normal_revenues`` is indexed by level (index 0 unused) and gives the
    revenue the asset earns under normal economic conditions. The rules
    engine only reads assets; ``revenue_this_turn`` is written by the caller
    after allocation.
    """

    asset_type: ClassVar[AssetType]
    min_level: ClassVar[int] = MIN_LEVEL
    max_level: ClassVar[int] = MAX_LEVEL

    asset_id: str
    name: str
    level: int = MIN_LEVEL
    normal_revenues: List[int] = field(default_factory=list)
    revenue_this_turn: int = 0

    def __post_init__(self):
        self._check_level(self.level)

    def _check_level(self, level: int):
        if level > self.max_level:
            raise ValueError(
                f"Attempt to set level {level} on {self.asset_id} "
                f"which is above maximum of {self.max_level}"
            )
        if level < self.min_level:
            raise ValueError(
                f"Attempt to set level {level} on {self.asset_id} "
                f"which is below minimum of {self.min_level}"
            )

    def set_level(self, level: int):
        """Change the asset's level, enforcing min/max bounds."""
        self._check_level(level)
        self.level = level

    @property
    def normal_revenue(self) -> int:
        """Revenue at the current level under normal conditions."""
        return self.normal_revenues[self.level]


@dataclass
class Factory(GameAsset):
    asset_type: ClassVar[AssetType] = AssetType.FACTORY


@dataclass
class Houses(GameAsset):
    asset_type: ClassVar[AssetType] = AssetType.HOUSES

    market_price: int = 0


@dataclass
class Crops(GameAsset):
    asset_type: ClassVar[AssetType] = AssetType.CROPS

    crop_type: str = "rice"


@dataclass
class Player:
    """A player and their water holdings."""

    player_id: str
    name: str
    water_entitlement: int = 0
    water: int = 0
    money: int = 0


@dataclass
class BuyPoint:
    """A land parcel that carries initial water rights."""

    buy_point_id: str
    name: str = ""
    initial_water_rights: int = 0


@dataclass
class Forecast:
    """Player-facing forecast for the coming round."""

    water: Optional[str] = None
    economic: Optional[Dict[AssetType, Dict[int, str]]] = None


@dataclass
class GameContext:
    """Shared round context read by generators, distributors and forecasters.

    The rules engine never advances ``current_round``; that is the job of
    the round manager or whatever external state machine drives the game.
    """

    game_id: str
    current_round: int = 0
    total_rounds: int = 1
    players: Dict[str, Player] = field(default_factory=dict)
    buy_points: Dict[str, BuyPoint] = field(default_factory=dict)
    assets: Dict[str, GameAsset] = field(default_factory=dict)
    water_pool: int = 0
    economic_conditions: Dict[AssetType, Dict[int, float]] = field(default_factory=dict)
    forecast: Forecast = field(default_factory=Forecast)

    def __post_init__(self):
        if self.total_rounds < 1:
            raise ValueError(f"total_rounds must be at least 1, got {self.total_rounds}")

    @property
    def is_last_round(self) -> bool:
        return self.current_round >= self.total_rounds

    def add_player(self, player: Player):
        self.players[player.player_id] = player

    def add_buy_point(self, buy_point: BuyPoint):
        self.buy_points[buy_point.buy_point_id] = buy_point

    def add_asset(self, asset: GameAsset):
        self.assets[asset.asset_id] = asset

    def get_asset(self, asset_id: str) -> Optional[GameAsset]:
        return self.assets.get(asset_id)

    def total_water_entitlement(self) -> int:
        """Sum of every player's water entitlement."""
        return sum(p.water_entitlement for p in self.players.values())

    def total_initial_water_rights(self) -> int:
        """Sum of every registered buy point's initial water rights."""
        return sum(bp.initial_water_rights for bp in self.buy_points.values())
