class BalancingError(Exception):
    """Base class for every failure a balancing request can signal.

    ``code`` is a stable machine-readable identifier the service layer puts
    into its error envelope; ``internal`` marks invariant violations that
    should never be caused by user input.
    """

    code = "balancing_error"
    internal = False

    def __init__(self, message: str = ""):
        super().__init__(message or self.code)
        self.message = message or self.code


class InsufficientParticipants(BalancingError):
    code = "not_enough_players"

    def __init__(self, count: int, minimum: int = 2):
        super().__init__(f"need at least {minimum} eligible participants, got {count}")
        self.count = count
        self.minimum = minimum


class TooManyParticipants(BalancingError):
    code = "too_many_players"

    def __init__(self, count: int, maximum: int):
        super().__init__(f"at most {maximum} participants can be balanced, got {count}")
        self.count = count
        self.maximum = maximum


class RankLookupFailed(BalancingError):
    code = "rank_lookup_failed"


class NoCombinations(BalancingError):
    code = "no_combinations"
    internal = True


class NoCandidates(BalancingError):
    code = "no_candidates"
    internal = True


class SelectionFailed(BalancingError):
    code = "selection_failed"
    internal = True
