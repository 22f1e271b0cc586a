import hashlib
import random
from typing import Iterable, Mapping, Optional, Protocol, Sequence

from .config import SelectionMode
from .errors import NoCandidates
from .types import Combination, RankRecord, Selection


class IndexSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def seed_from(
    participant_ids: Iterable[str],
    ranks: Mapping[str, RankRecord],
    token: Optional[str] = None,
) -> int:
    """Stable 64-bit seed for a roster, its ranks and a freshness token."""
    ids = sorted(participant_ids)
    assignments = sorted(f"{pid}:{ranks[pid].assignment()}" for pid in ids if pid in ranks)
    payload = "\n".join([",".join(ids), ",".join(assignments), token or ""])
    digest = hashlib.sha256(payload.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


def seeded_rng(
    participant_ids: Iterable[str],
    ranks: Mapping[str, RankRecord],
    token: Optional[str] = None,
) -> random.Random:
    return random.Random(seed_from(participant_ids, ranks, token))


def uniform_rng() -> random.SystemRandom:
    return random.SystemRandom()


def rng_for(
    mode: SelectionMode,
    participant_ids: Iterable[str],
    ranks: Mapping[str, RankRecord],
    token: Optional[str] = None,
) -> IndexSource:
    if mode == SelectionMode.UNIFORM:
        return uniform_rng()
    return seeded_rng(participant_ids, ranks, token)


def select(candidates: Sequence[Combination], rng: IndexSource) -> Selection:
    total = len(candidates)
    if total == 0:
        raise NoCandidates("no candidate combinations to select from")
    index = rng.randrange(total)
    if not 0 <= index < total:
        raise NoCandidates(f"index {index} outside of {total} candidates")
    return Selection(combination=candidates[index], index=index, total=total)
