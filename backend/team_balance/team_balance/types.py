from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .config import LOWEST_TIER


@dataclass(frozen=True)
class Participant:
    id: str
    label: str = ""

    @property
    def display_name(self) -> str:
        return self.label or self.id


@dataclass(frozen=True)
class RankRecord:
    tier: str = LOWEST_TIER
    division: str = ""

    @classmethod
    def unranked(cls) -> "RankRecord":
        return cls()

    def assignment(self) -> str:
        return f"{self.tier}:{self.division}"


@dataclass(frozen=True)
class ScoredParticipant:
    participant: Participant
    rank: RankRecord
    skill_value: float

    @property
    def id(self) -> str:
        return self.participant.id


@dataclass(frozen=True)
class Team:
    members: Tuple[ScoredParticipant, ...] = ()

    @property
    def total_skill(self) -> float:
        return sum(member.skill_value for member in self.members)

    @property
    def ids(self) -> List[str]:
        return [member.id for member in self.members]

    def __len__(self) -> int:
        return len(self.members)

    def to_dict(self) -> dict:
        return {
            "members": [
                {
                    "id": member.id,
                    "label": member.participant.display_name,
                    "tier": member.rank.tier,
                    "division": member.rank.division,
                    "skill_value": member.skill_value,
                }
                for member in self.members
            ],
            "total_skill": self.total_skill,
        }


@dataclass(frozen=True)
class Combination:
    team_a: Team
    team_b: Team

    @property
    def power_difference(self) -> float:
        return abs(self.team_a.total_skill - self.team_b.total_skill)


@dataclass(frozen=True)
class Selection:
    combination: Combination
    index: int
    total: int


@dataclass(frozen=True)
class BalancingResult:
    combination: Combination
    selected_index: int
    candidate_count: int
    combination_count: int
    within_threshold: bool
    excluded: List[Participant] = field(default_factory=list)
    token: Optional[str] = None

    @property
    def team_a(self) -> Team:
        return self.combination.team_a

    @property
    def team_b(self) -> Team:
        return self.combination.team_b

    @property
    def power_difference(self) -> float:
        return self.combination.power_difference

    def to_dict(self) -> Dict[str, object]:
        return {
            "team_a": self.team_a.to_dict(),
            "team_b": self.team_b.to_dict(),
            "power_difference": self.power_difference,
            "within_threshold": self.within_threshold,
            "selection": {
                "index": self.selected_index,
                "candidates": self.candidate_count,
                "combinations": self.combination_count,
            },
            "excluded": [{"id": p.id, "label": p.display_name} for p in self.excluded],
        }
