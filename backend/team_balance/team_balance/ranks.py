from typing import Iterable, List, Mapping, Optional, Tuple

from .config import DIVISIONS, NO_DIVISION_TIERS, TIERS, Config
from .types import Participant, RankRecord, ScoredParticipant


def _clean(value: Optional[str]) -> str:
    if value is None:
        return ""
    return str(value).strip().upper()


def normalize_rank(tier: Optional[str], division: Optional[str]) -> Tuple[str, str]:
    tier = _clean(tier) or TIERS[0]
    division = _clean(division)
    if tier in NO_DIVISION_TIERS or division not in DIVISIONS:
        division = ""
    return tier, division


def division_ordinal(division: Optional[str]) -> int:
    """IV is 0 and I is 3; anything else (including no division) is 0."""
    division = _clean(division)
    if division not in DIVISIONS:
        return 0
    return DIVISIONS.index(division)


def tier_value(tier: Optional[str], cfg: Config) -> float:
    tier = _clean(tier) or TIERS[0]
    return max(0.0, float(cfg.tier_values.get(tier, cfg.unknown_tier_value)))


def score(tier: Optional[str], division: Optional[str], cfg: Config) -> float:
    tier = _clean(tier) or TIERS[0]
    base = tier_value(tier, cfg)
    if tier not in TIERS or tier in NO_DIVISION_TIERS:
        return base
    return base + max(0.0, division_ordinal(division) * cfg.division_bonus)


def score_record(record: RankRecord, cfg: Config) -> float:
    return score(record.tier, record.division, cfg)


def to_record(raw: object) -> RankRecord:
    if raw is None:
        return RankRecord.unranked()
    if isinstance(raw, RankRecord):
        tier, division = raw.tier, raw.division
    elif isinstance(raw, Mapping):
        tier, division = raw.get("tier"), raw.get("division")
    else:
        tier, division = raw
    return RankRecord(*normalize_rank(tier, division))


def score_participants(
    participants: Iterable[Participant],
    ranks: Mapping[str, object],
    cfg: Config,
) -> List[ScoredParticipant]:
    scored = []
    for participant in participants:
        record = to_record(ranks.get(participant.id))
        scored.append(ScoredParticipant(participant, record, score_record(record, cfg)))
    return scored
