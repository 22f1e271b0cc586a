from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

TIERS = (
    "UNRANKED",
    "IRON",
    "BRONZE",
    "SILVER",
    "GOLD",
    "PLATINUM",
    "DIAMOND",
    "MASTER",
    "GRANDMASTER",
    "CHALLENGER",
)
DIVISIONS = ("IV", "III", "II", "I")
NO_DIVISION_TIERS = frozenset({"UNRANKED", "MASTER", "GRANDMASTER", "CHALLENGER"})
LOWEST_TIER = TIERS[0]


class FilterPolicy(str, Enum):
    STRICT = "strict"
    THRESHOLD_WITH_FALLBACK = "threshold_with_fallback"


class SelectionMode(str, Enum):
    SEEDED = "seeded"
    UNIFORM = "uniform"


def default_tier_values() -> Dict[str, float]:
    return {tier: float(index * 4) for index, tier in enumerate(TIERS)}


@dataclass(frozen=True)
class Config:
    tier_values: Dict[str, float] = field(default_factory=default_tier_values)
    division_bonus: float = 1.0
    unknown_tier_value: float = 0.0

    max_power_difference: float = 2.0
    filter_policy: FilterPolicy = FilterPolicy.STRICT
    selection_mode: SelectionMode = SelectionMode.SEEDED

    min_participants: int = 2
    max_participants: int = 20
