import logging

from flask import Blueprint, current_app, request

from team_balance import score
from team_balance.ranks import normalize_rank

from ..config import balance_config
from ..services.balancing import balance_request, parse_participants
from ..utils import err, ok

logger = logging.getLogger(__name__)

bp = Blueprint("teams", __name__, url_prefix="/teams")


@bp.post("/balance")
def balance_teams():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return err("invalid_payload", 400)
    participants = parse_participants(data.get("participants"))
    if participants is None:
        return err("invalid_payload", 400)
    token = data.get("token")
    if token is not None and not isinstance(token, str):
        return err("invalid_payload", 400)
    exclude = data.get("exclude")
    if exclude is not None and not isinstance(exclude, (str, int, list)):
        return err("invalid_payload", 400)

    result = balance_request(
        participants,
        current_app.extensions["rank_lookup"],
        exclude=exclude,
        token=token,
        settings=current_app.config["SETTINGS"],
    )
    logger.info(
        "Balanced %d players (excluded %d): difference %.1f, pick %d/%d",
        len(result.team_a) + len(result.team_b),
        len(result.excluded),
        result.power_difference,
        result.selected_index + 1,
        result.candidate_count,
    )
    return ok({"result": result.to_dict()})


@bp.get("/score")
def score_rank():
    tier, division = normalize_rank(request.args.get("tier"), request.args.get("division"))
    cfg = balance_config(current_app.config["SETTINGS"])
    return ok({"tier": tier, "division": division, "skill_value": score(tier, division, cfg)})
