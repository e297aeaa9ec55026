"""Economic distributors - allocate potential revenue amongst game assets."""

import logging
import math
from typing import Dict, Iterable, List, Mapping

from src.configuration.config_source import ConfigSource, ConfigurationError
from src.rules_engine.config import GENERATION_PRECISION
from src.rules_engine.models import AssetType, GameAsset

logger = logging.getLogger(__name__)

EconomicConditions = Mapping[AssetType, Mapping[int, float]]


class AssetAllocationError(ConfigurationError):
    """Base for per-asset faults that batch allocation collects.

    Carries the identity of the asset that could not be allocated.
    """

    def __init__(self, asset: GameAsset, message: str):
        self.asset_id = asset.asset_id
        self.asset_type = asset.asset_type
        self.level = asset.level
        super().__init__(message)


class MissingConditionsError(AssetAllocationError):
    """Raised when no economic conditions exist for an asset's type and level."""

    def __init__(self, asset: GameAsset):
        super().__init__(
            asset,
            f"No economic conditions for {asset.asset_type.value} "
            f"level {asset.level} (asset {asset.asset_id})",
        )


class MissingRevenueError(AssetAllocationError):
    """Raised when an asset's revenue table has no entry for its level."""

    def __init__(self, asset: GameAsset):
        super().__init__(
            asset,
            f"No normal revenue for level {asset.level} on asset {asset.asset_id} "
            f"({len(asset.normal_revenues)} revenue entries)",
        )


class AllocationError(ConfigurationError):
    """Raised by batch allocation when some assets could not be allocated.

    Every other asset is still allocated; ``partial`` holds those results
    and ``faults`` one :class:`AssetAllocationError` per skipped asset.
    """

    def __init__(self, partial: Dict[str, int], faults: List[AssetAllocationError]):
        self.partial = partial
        self.faults = faults
        super().__init__(
            f"{len(faults)} asset(s) could not be allocated: "
            + "; ".join(str(f) for f in faults)
        )


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up.

    Float noise is rounded off first, so ``0.29 * 50`` (14.499999999999998)
    is treated as the 14.5 it stands for.
    """
    return int(math.floor(round(value, GENERATION_PRECISION) + 0.5))


class EconomicDistributor:
    """Base contract for revenue distributors.

    Subclasses implement :meth:`allocate`. Results are returned, never
    written to the assets; the caller applies them.
    """

    def allocate(self, conditions: EconomicConditions, asset: GameAsset) -> int:
        raise NotImplementedError

    def allocate_all(
        self,
        conditions: EconomicConditions,
        assets: Iterable[GameAsset],
    ) -> Dict[str, int]:
        """Allocate revenue to every asset independently.

        Returns:
            Dict mapping ``asset_id`` to revenue, one entry per asset.

        Raises:
            AllocationError: If any asset had no matching conditions or no
                revenue for its level.
        """
        allocation: Dict[str, int] = {}
        faults: List[AssetAllocationError] = []
        seen = set()

        for asset in assets:
            if asset.asset_id in seen:
                continue
            seen.add(asset.asset_id)
            try:
                allocation[asset.asset_id] = self.allocate(conditions, asset)
            except AssetAllocationError as e:
                faults.append(e)

        if faults:
            raise AllocationError(allocation, faults)

        return allocation

    def update_configuration(self, config_source: ConfigSource):
        """Reload any tunables. The base distributor has none."""


class SimpleEconomicDistributor(EconomicDistributor):
    """Scale each asset's normal revenue by the prevailing conditions.

    Formula::

        revenue = round_half_up(conditions[type][level] * normal_revenues[level])
    """

    def allocate(self, conditions: EconomicConditions, asset: GameAsset) -> int:
        try:
            multiplier = conditions[asset.asset_type][asset.level]
        except (KeyError, IndexError):
            raise MissingConditionsError(asset) from None

        try:
            normal_revenue = asset.normal_revenues[asset.level]
        except IndexError:
            raise MissingRevenueError(asset) from None

        revenue = round_half_up(multiplier * normal_revenue)

        logger.debug(
            "Allocated %d to %s (%s level %d, x%.3f)",
            revenue, asset.asset_id, asset.asset_type.value, asset.level, multiplier,
        )
        return revenue
