"""Build series objects and game settings from a configuration source.

Every loader builds a complete new object before returning, so a malformed
value leaves whatever the caller loaded previously untouched.
"""

import logging
from typing import Dict

from src.configuration.config import (
    ASSET_SECTIONS,
    GENERAL_SECTION,
    PARCEL_WATER_ENTITLEMENT_KEY,
    PARCELS_SECTION,
    REVENUE_SERIES_POSTFIX,
    ROUNDS_PER_GAME_KEY,
    WATER_DELIVERY_SERIES_KEY,
    get_asset_key,
    get_shared_asset_key,
)
from src.configuration.config_source import ConfigSource, ConfigurationError
from src.configuration.series_parser import parse_series
from src.rules_engine.config import MAX_LEVEL, MIN_LEVEL
from src.rules_engine.models import ASSET_TYPES, AssetType
from src.rules_engine.series import Series, TypedSeriesMap

logger = logging.getLogger(__name__)


def load_water_series(config_source: ConfigSource) -> Series:
    """Water delivery deviations from ``[General] water_delivery_series``.

    A missing section or key gives a neutral series.
    """
    if not config_source.has_section(GENERAL_SECTION):
        logger.warning("No [%s] section; water delivery will be normal", GENERAL_SECTION)
        return Series.neutral()

    general = config_source.section(GENERAL_SECTION)
    if not general.contains(WATER_DELIVERY_SERIES_KEY):
        logger.warning(
            "No %s configured; water delivery will be normal", WATER_DELIVERY_SERIES_KEY
        )
        return Series.neutral()

    series = Series(parse_series(general.get_string(WATER_DELIVERY_SERIES_KEY)))
    logger.debug("Loaded water delivery series with %d rounds", len(series))
    return series


def load_typed_series(config_source: ConfigSource) -> TypedSeriesMap:
    """Economic revenue deviations for every asset type and level.

    Within each asset section, ``<prefix>_revenue_series`` applies to every
    level and ``<prefix>_<level>_revenue_series`` overrides it for one
    level. Sections and keys that are absent are left out of the map.
    """
    series_by_type: Dict[AssetType, Dict[int, Series]] = {}

    for asset_type in ASSET_TYPES:
        section_name, prefix = ASSET_SECTIONS[asset_type]
        if not config_source.has_section(section_name):
            continue

        section = config_source.section(section_name)
        levels: Dict[int, Series] = {}

        shared_key = get_shared_asset_key(prefix, REVENUE_SERIES_POSTFIX)
        if section.contains(shared_key):
            shared = Series(parse_series(section.get_string(shared_key)))
            for level in range(MIN_LEVEL, MAX_LEVEL + 1):
                levels[level] = shared

        for level in range(MIN_LEVEL, MAX_LEVEL + 1):
            key = get_asset_key(prefix, level, REVENUE_SERIES_POSTFIX)
            if section.contains(key):
                levels[level] = Series(parse_series(section.get_string(key)))

        if levels:
            series_by_type[asset_type] = levels
            logger.debug(
                "Loaded %s revenue series for levels %s",
                asset_type.value, sorted(levels),
            )

    return TypedSeriesMap(series_by_type)


def load_total_rounds(config_source: ConfigSource) -> int:
    """Number of rounds in a game from ``[General] rounds_per_game``."""
    total_rounds = config_source.section(GENERAL_SECTION).get_int(ROUNDS_PER_GAME_KEY)
    if total_rounds < 1:
        raise ConfigurationError(
            f"{ROUNDS_PER_GAME_KEY} must be at least 1, got {total_rounds}"
        )
    return total_rounds


def load_water_per_parcel(config_source: ConfigSource) -> int:
    """Water each buy point is entitled to, from ``[Parcels] water_entitlement``."""
    water_per_parcel = config_source.section(PARCELS_SECTION).get_int(PARCEL_WATER_ENTITLEMENT_KEY)
    if water_per_parcel < 0:
        raise ConfigurationError(
            f"{PARCEL_WATER_ENTITLEMENT_KEY} cannot be negative, got {water_per_parcel}"
        )
    return water_per_parcel
