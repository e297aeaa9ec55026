from src.rules_engine.models import AssetType

# General section
GENERAL_SECTION = "General"
ROUNDS_PER_GAME_KEY = "rounds_per_game"
WATER_DELIVERY_SERIES_KEY = "water_delivery_series"

# Asset sections and the key prefix used inside each one
ASSET_SECTIONS = {
    AssetType.FACTORY: ("Factories", "factories"),
    AssetType.HOUSES: ("Condos", "condos"),
    AssetType.CROPS: ("Crops", "crops"),
}

# Parcels section, read by the per-parcel water generators
PARCELS_SECTION = "Parcels"
PARCEL_WATER_ENTITLEMENT_KEY = "water_entitlement"

REVENUE_SERIES_POSTFIX = "revenue_series"

# Series literals are "0, 0.9, 1.2" or "0; 0.9; 1.2"
SERIES_SEPARATORS = ",;"


def get_asset_key(prefix: str, level: int, postfix: str) -> str:
    """Per-level key, e.g. ``condos_2_revenue_series``."""
    return f"{prefix}_{level}_{postfix}"


def get_shared_asset_key(prefix: str, postfix: str) -> str:
    """Key shared by every level, e.g. ``factories_revenue_series``."""
    return f"{prefix}_{postfix}"
