from itertools import combinations
from math import comb
from typing import List, Sequence

from .types import Combination, ScoredParticipant, Team


def count_combinations(n: int) -> int:
    if n <= 0:
        return 0
    return comb(n, n // 2)


def generate(scored: Sequence[ScoredParticipant]) -> List[Combination]:
    """Every split of ``scored`` into a floor(N/2) team A and its complement.

    Participants are ordered by identifier first, so the same roster always
    enumerates in the same order no matter how the caller listed it.
    """
    ordered = tuple(sorted(scored, key=lambda p: p.id))
    if not ordered:
        return []
    team_size = len(ordered) // 2

    result = []
    for picked in combinations(range(len(ordered)), team_size):
        chosen = set(picked)
        team_a = Team(tuple(ordered[i] for i in picked))
        team_b = Team(tuple(p for i, p in enumerate(ordered) if i not in chosen))
        result.append(Combination(team_a, team_b))
    return result
