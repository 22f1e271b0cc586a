from .balancer import balance
from .combinations import count_combinations, generate
from .config import Config, FilterPolicy, SelectionMode
from .errors import (
    BalancingError,
    InsufficientParticipants,
    NoCandidates,
    NoCombinations,
    RankLookupFailed,
    SelectionFailed,
    TooManyParticipants,
)
from .evaluation import Evaluation, evaluate
from .ranks import score
from .selection import seed_from, seeded_rng, select
from .types import BalancingResult, Combination, Participant, RankRecord, ScoredParticipant, Team

__all__ = [
    "BalancingError",
    "BalancingResult",
    "Combination",
    "Config",
    "Evaluation",
    "FilterPolicy",
    "InsufficientParticipants",
    "NoCandidates",
    "NoCombinations",
    "Participant",
    "RankLookupFailed",
    "RankRecord",
    "ScoredParticipant",
    "SelectionFailed",
    "SelectionMode",
    "Team",
    "TooManyParticipants",
    "balance",
    "count_combinations",
    "evaluate",
    "generate",
    "score",
    "seed_from",
    "seeded_rng",
    "select",
]
