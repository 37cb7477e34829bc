from passgauge.estimator import CRACK_SCENARIOS, EstimatorResult, Feedback, PatternMatch


class StubEstimator:
    """Returns a fixed score/guesses for every password and records what it saw."""

    def __init__(self, score=2, guesses=1e6, patterns=("bruteforce",), warning="", suggestions=()):
        self.score = score
        self.guesses = guesses
        self.patterns = patterns
        self.warning = warning
        self.suggestions = tuple(suggestions)
        self.seen = []

    def estimate(self, password):
        self.seen.append(password)
        return EstimatorResult(
            score=self.score,
            guesses=self.guesses,
            feedback=Feedback(self.warning, self.suggestions),
            crack_times_display={k: "3 hours" for k in CRACK_SCENARIOS},
            crack_times_seconds={k: 10800.0 for k in CRACK_SCENARIOS},
            sequence=tuple(PatternMatch(p, password) for p in self.patterns),
        )
