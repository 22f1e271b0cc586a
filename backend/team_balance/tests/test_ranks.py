import pytest

from team_balance import Config, score
from team_balance.config import DIVISIONS, NO_DIVISION_TIERS, TIERS
from team_balance.ranks import normalize_rank, score_participants
from team_balance.types import Participant, RankRecord


def test_default_table_matches_tier_index():
    cfg = Config()
    assert score("UNRANKED", None, cfg) == 0.0
    assert score("IRON", "IV", cfg) == 4.0
    assert score("GOLD", "II", cfg) == 18.0
    assert score("CHALLENGER", "", cfg) == 36.0


@pytest.mark.parametrize("tier", [t for t in TIERS if t not in NO_DIVISION_TIERS])
def test_divisions_are_monotonic(tier):
    cfg = Config()
    values = [score(tier, division, cfg) for division in ("I", "II", "III", "IV")]
    assert values == sorted(values, reverse=True)
    assert values[0] > values[-1]


@pytest.mark.parametrize("tier", sorted(NO_DIVISION_TIERS))
def test_no_division_tiers_ignore_division(tier):
    cfg = Config()
    base = cfg.tier_values[tier]
    for division in DIVISIONS + ("", None, "NONE"):
        assert score(tier, division, cfg) == base


def test_unknown_tier_and_division_never_fail():
    cfg = Config(unknown_tier_value=1.5)
    assert score("EMERALD", "II", cfg) == 1.5
    assert score("GOLD", "V", cfg) == cfg.tier_values["GOLD"]
    assert score(None, None, cfg) == 0.0


def test_case_and_whitespace_are_normalized():
    cfg = Config()
    assert score(" gold ", "ii", cfg) == score("GOLD", "II", cfg)
    assert normalize_rank("master", "I") == ("MASTER", "")
    assert normalize_rank("", "NONE") == ("UNRANKED", "")


def test_custom_table_and_bonus():
    cfg = Config(tier_values={"UNRANKED": 100.0, "GOLD": 500.0}, division_bonus=25.0)
    assert score("GOLD", "I", cfg) == 575.0
    assert score("SILVER", "I", cfg) == 75.0
    assert score("UNRANKED", "I", cfg) == 100.0


def test_scores_are_never_negative():
    cfg = Config(tier_values={"GOLD": -10.0}, division_bonus=-3.0, unknown_tier_value=-1.0)
    assert score("GOLD", "I", cfg) == 0.0
    assert score("IRON", "IV", cfg) == 0.0


def test_missing_record_scores_as_unranked():
    cfg = Config(tier_values={**Config().tier_values, "UNRANKED": 7.0})
    scored = score_participants(
        [Participant("a"), Participant("b")],
        {"b": RankRecord("GOLD", "IV")},
        cfg,
    )
    assert scored[0].rank == RankRecord("UNRANKED", "")
    assert scored[0].skill_value == 7.0
    assert scored[1].skill_value == 16.0
