"""Round-indexed deviation series and their typed, level-indexed container.

A series holds one multiplier per round, where index 0 is the pre-game
build round. Every lookup that falls outside the stored data (a round past
the end, an empty slot, an unknown asset type or level) resolves to
``NEUTRAL_DEVIATION`` - missing data means normal conditions.
"""

from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from src.rules_engine.config import NEUTRAL_DEVIATION
from src.rules_engine.models import AssetType


class Series:
    """Immutable sequence of per-round deviations."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Optional[float]] = ()):
        self._values: Tuple[Optional[float], ...] = tuple(
            None if v is None else float(v) for v in values
        )

    @classmethod
    def neutral(cls) -> "Series":
        """A series with no data, so every round reads as normal."""
        return cls(())

    def lookup(self, round_number: int) -> float:
        """Deviation for *round_number*, or 1.0 when there is no data."""
        if 0 <= round_number < len(self._values):
            value = self._values[round_number]
            if value is not None:
                return value
        return NEUTRAL_DEVIATION

    def values(self) -> List[Optional[float]]:
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Optional[float]]:
        return iter(self._values)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Series):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Series({list(self._values)!r})"


def lookup(series: Optional[Series], round_number: int) -> float:
    """Look up *round_number* in *series*; a missing series reads as 1.0."""
    if series is None:
        return NEUTRAL_DEVIATION
    return series.lookup(round_number)


class TypedSeriesMap:
    """Deviation series keyed by asset type, then by asset level.

    Structure::

        {AssetType.FACTORY: {1: Series, 2: Series, 3: Series}, ...}

    Each axis defaults independently: an unknown type, a level with no
    series, or a round beyond the series all give 1.0.
    """

    def __init__(
        self,
        series_by_type: Optional[Mapping[AssetType, Mapping[int, Series]]] = None,
    ):
        self._series: Dict[AssetType, Dict[int, Series]] = {
            asset_type: dict(levels)
            for asset_type, levels in (series_by_type or {}).items()
        }

    def get(self, asset_type: AssetType, level: int) -> Optional[Series]:
        """The series for (*asset_type*, *level*), or None if absent."""
        return self._series.get(asset_type, {}).get(level)

    def lookup(self, asset_type: AssetType, level: int, round_number: int) -> float:
        return lookup(self.get(asset_type, level), round_number)

    def asset_types(self) -> List[AssetType]:
        return list(self._series)

    def levels(self, asset_type: AssetType) -> List[int]:
        return sorted(self._series.get(asset_type, {}))

    def __contains__(self, asset_type) -> bool:
        return asset_type in self._series

    def __len__(self) -> int:
        return len(self._series)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TypedSeriesMap):
            return NotImplemented
        return self._series == other._series

    def __repr__(self) -> str:
        return f"TypedSeriesMap({self._series!r})"
