import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import Config, FilterPolicy
from .types import Combination

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Evaluation:
    within_threshold: List[Combination] = field(default_factory=list)
    ranked: List[Combination] = field(default_factory=list)
    threshold: float = 0.0

    @property
    def best(self) -> Optional[Combination]:
        return self.ranked[0] if self.ranked else None

    @property
    def used_fallback(self) -> bool:
        return not self.within_threshold and bool(self.ranked)

    def candidates(self) -> List[Combination]:
        if self.within_threshold:
            return list(self.within_threshold)
        if self.ranked:
            return [self.ranked[0]]
        return []


def rank_by_difference(combinations: Sequence[Combination]) -> List[Combination]:
    # sorted() is stable, so ties keep enumeration order
    return sorted(combinations, key=lambda c: c.power_difference)


def evaluate(combinations: Sequence[Combination], cfg: Config) -> Evaluation:
    threshold = cfg.max_power_difference
    within = [c for c in combinations if c.power_difference <= threshold]
    ranked = rank_by_difference(combinations)
    if cfg.filter_policy == FilterPolicy.STRICT:
        ranked = ranked[:1]

    if not within and ranked:
        logger.debug(
            "no split within %.2f, falling back to best difference %.2f",
            threshold,
            ranked[0].power_difference,
        )
    return Evaluation(within_threshold=within, ranked=ranked, threshold=threshold)
