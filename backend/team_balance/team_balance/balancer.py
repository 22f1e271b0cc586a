import logging
from typing import Callable, Iterable, List, Mapping, Optional, Sequence, Tuple

from .combinations import generate
from .config import Config
from .errors import (
    InsufficientParticipants,
    NoCandidates,
    NoCombinations,
    RankLookupFailed,
    SelectionFailed,
    TooManyParticipants,
)
from .evaluation import evaluate
from .ranks import score_participants, to_record
from .selection import IndexSource, rng_for, select
from .types import BalancingResult, Participant, RankRecord

logger = logging.getLogger(__name__)

RankLookup = Callable[[List[str]], Mapping[str, object]]


def _split_eligible(
    participants: Iterable[Participant], exclusions: Iterable[str]
) -> Tuple[List[Participant], List[Participant]]:
    excluded_ids = {str(e) for e in exclusions}
    seen = set()
    eligible, excluded = [], []
    for participant in participants:
        if participant.id in seen:
            continue
        seen.add(participant.id)
        if participant.id in excluded_ids:
            excluded.append(participant)
        else:
            eligible.append(participant)
    return eligible, excluded


def resolve_ranks(rank_lookup: RankLookup, ids: List[str]) -> dict[str, RankRecord]:
    try:
        raw = rank_lookup(list(ids))
    except RankLookupFailed:
        raise
    except Exception as exc:
        raise RankLookupFailed(f"rank lookup failed: {exc}") from exc
    if raw is None:
        raw = {}
    try:
        return {pid: to_record(raw.get(pid)) for pid in ids}
    except (AttributeError, TypeError, ValueError) as exc:
        raise RankLookupFailed(f"rank lookup returned malformed data: {exc}") from exc


def balance(
    participants: Sequence[Participant],
    rank_lookup: RankLookup,
    exclusions: Iterable[str] = (),
    cfg: Optional[Config] = None,
    token: Optional[str] = None,
    rng: Optional[IndexSource] = None,
) -> BalancingResult:
    """Split ``participants`` into two teams of comparable rank strength.

    ``rank_lookup`` is called once with every eligible identifier; identifiers
    it leaves out are treated as unranked. ``token`` only feeds the seeded
    selection, and ``rng`` overrides the configured selection mode entirely.
    """
    cfg = cfg or Config()
    eligible, excluded = _split_eligible(participants, exclusions)
    minimum = max(2, cfg.min_participants)
    if len(eligible) < minimum:
        raise InsufficientParticipants(len(eligible), minimum)
    if len(eligible) > cfg.max_participants:
        raise TooManyParticipants(len(eligible), cfg.max_participants)

    ids = [p.id for p in eligible]
    ranks = resolve_ranks(rank_lookup, ids)
    scored = score_participants(eligible, ranks, cfg)

    combinations = generate(scored)
    if not combinations:
        # unreachable while the participant guard above holds
        raise NoCombinations(f"no combinations for {len(scored)} participants")

    evaluation = evaluate(combinations, cfg)
    candidates = evaluation.candidates()
    logger.debug(
        "%d participants, %d combinations, %d within %.2f",
        len(scored),
        len(combinations),
        len(evaluation.within_threshold),
        evaluation.threshold,
    )
    if evaluation.used_fallback:
        logger.info(
            "no split within %.2f, using best difference %.2f",
            evaluation.threshold,
            evaluation.best.power_difference,
        )

    if rng is None:
        rng = rng_for(cfg.selection_mode, ids, ranks, token)
    try:
        selection = select(candidates, rng)
    except NoCandidates as exc:
        raise SelectionFailed(str(exc)) from exc

    return BalancingResult(
        combination=selection.combination,
        selected_index=selection.index,
        candidate_count=selection.total,
        combination_count=len(combinations),
        within_threshold=not evaluation.used_fallback,
        excluded=excluded,
        token=token,
    )
