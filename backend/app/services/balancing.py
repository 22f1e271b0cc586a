from typing import Iterable, List

from team_balance import BalancingResult, Participant, balance

from ..config import Config, balance_config
from ..utils import now_utc
from .exclusions import parse_exclusions


def parse_participants(raw) -> List[Participant] | None:
    if not isinstance(raw, list):
        return None
    participants = []
    for item in raw:
        if isinstance(item, dict):
            pid = item.get("id")
            label = item.get("label") or item.get("name") or ""
        else:
            pid, label = item, ""
        if pid is None or str(pid).strip() == "":
            return None
        participants.append(Participant(str(pid).strip(), str(label)))
    return participants


def balance_request(
    participants: List[Participant],
    rank_lookup,
    exclude: str | Iterable[str] | None = None,
    token: str | None = None,
    settings=Config,
) -> BalancingResult:
    if token is None:
        token = now_utc().isoformat()
    return balance(
        participants,
        rank_lookup,
        exclusions=parse_exclusions(exclude),
        cfg=balance_config(settings),
        token=token,
    )
