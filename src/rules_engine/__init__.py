from src.rules_engine.models import (
    ASSET_TYPES,
    AssetType,
    BuyPoint,
    Crops,
    Factory,
    Forecast,
    GameAsset,
    GameContext,
    Houses,
    Player,
)
from src.rules_engine.series import Series, TypedSeriesMap, lookup

__all__ = [
    "ASSET_TYPES",
    "AssetType",
    "BuyPoint",
    "Crops",
    "Factory",
    "Forecast",
    "GameAsset",
    "GameContext",
    "Houses",
    "Player",
    "Series",
    "TypedSeriesMap",
    "lookup",
]
