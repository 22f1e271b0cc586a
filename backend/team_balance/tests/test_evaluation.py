from team_balance import Config, FilterPolicy, evaluate, generate
from team_balance.ranks import score_participants


def _combinations(participants, ranks):
    return generate(score_participants(participants, ranks, Config()))


def test_power_difference_and_threshold(scenario_a):
    participants, ranks = scenario_a
    evaluation = evaluate(_combinations(participants, ranks), Config(max_power_difference=2.0))

    assert [c.power_difference for c in evaluation.within_threshold] == [2.0, 0.0, 0.0, 2.0]
    assert evaluation.candidates() == evaluation.within_threshold
    assert not evaluation.used_fallback


def test_ranked_is_stable_ascending(scenario_a):
    participants, ranks = scenario_a
    combinations = _combinations(participants, ranks)
    cfg = Config(filter_policy=FilterPolicy.THRESHOLD_WITH_FALLBACK)
    evaluation = evaluate(combinations, cfg)

    assert [c.power_difference for c in evaluation.ranked] == [0.0, 0.0, 2.0, 2.0, 10.0, 10.0]
    assert evaluation.ranked[0].team_a.ids == ["P1", "P4"]
    assert evaluation.ranked[1].team_a.ids == ["P2", "P3"]


def test_strict_policy_keeps_only_best(scenario_a):
    participants, ranks = scenario_a
    evaluation = evaluate(_combinations(participants, ranks), Config(max_power_difference=-1.0))

    assert evaluation.within_threshold == []
    assert len(evaluation.ranked) == 1
    assert evaluation.candidates() == [evaluation.best]
    assert evaluation.best.team_a.ids == ["P1", "P4"]
    assert evaluation.used_fallback


def test_fallback_picks_global_minimum_with_enumeration_tie_break():
    from team_balance.types import Participant, RankRecord

    participants = [Participant("a"), Participant("b"), Participant("c")]
    ranks = {"a": RankRecord(), "b": RankRecord("IRON", "IV"), "c": RankRecord("CHALLENGER")}
    for policy in FilterPolicy:
        evaluation = evaluate(
            _combinations(participants, ranks),
            Config(max_power_difference=0.0, filter_policy=policy),
        )
        assert evaluation.candidates()[0].team_a.ids == ["b"]
        assert evaluation.candidates()[0].power_difference == 32.0


def test_empty_input():
    evaluation = evaluate([], Config())
    assert evaluation.candidates() == []
    assert evaluation.best is None
