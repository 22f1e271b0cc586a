import pytest

from team_balance import Participant, RankRecord


class FixedIndex:
    def __init__(self, index: int):
        self.index = index
        self.calls = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self.index


@pytest.fixture
def fixed_index():
    return FixedIndex


@pytest.fixture
def scenario_a():
    participants = [Participant(f"P{i}", f"Player {i}") for i in range(1, 5)]
    ranks = {
        "P1": RankRecord("GOLD", "II"),
        "P2": RankRecord("SILVER", "III"),
        "P3": RankRecord("GOLD", "I"),
        "P4": RankRecord("SILVER", "II"),
    }
    return participants, ranks
