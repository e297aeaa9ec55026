"""Round history - a ledger of realized round outcomes with tabular views."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pandas as pd

from src.rules_engine.distributors import AssetAllocationError
from src.rules_engine.models import AssetType, Forecast

ROUND_COLUMNS = ["round", "water_generated", "water_forecast", "total_revenue", "faults"]
REVENUE_COLUMNS = ["round", "asset_id", "revenue"]


@dataclass
class RoundOutcome:
    """Everything realized for one round after player decisions."""

    round: int
    water_generated: int
    economic_conditions: Dict[AssetType, Dict[int, float]]
    revenues: Dict[str, int]
    forecast: Optional[Forecast] = None
    faults: List[AssetAllocationError] = field(default_factory=list)
    water_allocated: Dict[str, int] = field(default_factory=dict)

    @property
    def total_revenue(self) -> int:
        return sum(self.revenues.values())


class RoundHistory:
    """Keeps one :class:`RoundOutcome` per round.

    Recording a round twice replaces the earlier outcome, so replaying a
    round never double-counts it.
    """

    def __init__(self):
        self._outcomes: Dict[int, RoundOutcome] = {}

    def record(self, outcome: RoundOutcome):
        self._outcomes[outcome.round] = outcome

    def get(self, round_number: int) -> Optional[RoundOutcome]:
        return self._outcomes.get(round_number)

    def outcomes(self) -> List[RoundOutcome]:
        """Outcomes in round order."""
        return [self._outcomes[r] for r in sorted(self._outcomes)]

    def __len__(self) -> int:
        return len(self._outcomes)

    def to_frame(self) -> pd.DataFrame:
        """One row per round."""
        rows = [
            {
                "round": o.round,
                "water_generated": o.water_generated,
                "water_forecast": o.forecast.water if o.forecast else None,
                "total_revenue": o.total_revenue,
                "faults": len(o.faults),
            }
            for o in self.outcomes()
        ]
        return pd.DataFrame(rows, columns=ROUND_COLUMNS)

    def revenue_frame(self) -> pd.DataFrame:
        """One row per (round, asset) allocation."""
        rows = [
            {"round": o.round, "asset_id": asset_id, "revenue": revenue}
            for o in self.outcomes()
            for asset_id, revenue in sorted(o.revenues.items())
        ]
        return pd.DataFrame(rows, columns=REVENUE_COLUMNS)
