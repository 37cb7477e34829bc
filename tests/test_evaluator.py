import math
from decimal import Decimal

from passgauge.estimator import CRACK_SCENARIOS, FAST_HASHING, SLOW_HASHING, FallbackEstimator
from passgauge.evaluator import (
    EMPTY_LABEL,
    ENTROPY_CEILING,
    LEVELS,
    analyze_password,
    compute_entropy,
    crack_time_percentage,
    security_level,
    tier_for,
)
from tests.stubs import StubEstimator


def test_empty_password_is_sentinel():
    est = StubEstimator()
    result = analyze_password("", estimator=est)
    assert est.seen == []  # never estimated
    assert result.score == 0
    assert result.entropy == 0
    assert result.compliance == ()
    assert result.char_count == 0
    assert result.patterns == ()
    assert result.feedback.warning == ""
    assert result.feedback.suggestions == ()
    assert result.label == EMPTY_LABEL
    assert set(result.crack_times_display) == set(CRACK_SCENARIOS)
    assert all(v == "-" for v in result.crack_times_display.values())
    assert result.crack_time_seconds == {SLOW_HASHING: 0, FAST_HASHING: 0}


def test_char_count_matches_length():
    for pw in ["a", "Abcdefg1!", "correct-horse-battery-staple", "ünïcødé pass"]:
        assert analyze_password(pw, estimator=StubEstimator()).char_count == len(pw)


def test_compliance_has_four_checks_in_order():
    result = analyze_password("hunter2", estimator=StubEstimator())
    assert [c.code for c in result.compliance] == ["NIST", "OWASP", "ENISA", "ISO"]
    assert all(c.reason for c in result.compliance)


def test_entropy_from_guesses():
    assert compute_entropy(1024) == 10
    assert compute_entropy(1e6) == 20  # log2 = 19.93
    assert compute_entropy(2 ** 101) == 101


def test_entropy_clamps_degenerate_guesses():
    assert compute_entropy(0) == 0
    assert compute_entropy(-5) == 0
    assert compute_entropy(0.25) == 0  # log2 = -2
    assert compute_entropy(math.nan) == 0
    assert compute_entropy(Decimal("NaN")) == 0
    assert compute_entropy("lots") == 0


def test_entropy_for_guesses_beyond_float_range():
    assert compute_entropy(2 ** 2000) == ENTROPY_CEILING
    assert compute_entropy(math.inf) == ENTROPY_CEILING
    assert compute_entropy(Decimal("Infinity")) == ENTROPY_CEILING
    assert compute_entropy(Decimal(2) ** 500) == 500
    assert compute_entropy(Decimal("1e400")) == ENTROPY_CEILING
    result = analyze_password("whatever", estimator=StubEstimator(score=0, guesses=10 ** 400))
    assert result.entropy == ENTROPY_CEILING
    assert result.label == "Excellent"


def test_labels_follow_score():
    labels = [analyze_password("whatever", estimator=StubEstimator(score=s, guesses=100)).label for s in range(5)]
    assert labels == ["Very Weak", "Weak", "Fair", "Good", "Strong"]


def test_high_entropy_overrides_label():
    result = analyze_password("whatever", estimator=StubEstimator(score=1, guesses=2.0 ** 120))
    assert result.entropy == 120
    assert result.label == "Excellent"
    assert tier_for(0, 101)[0] == "Excellent"
    assert tier_for(4, 100)[0] == "Strong"


def test_fallback_estimator_result():
    result = analyze_password("longenough", estimator=FallbackEstimator())
    assert result.score == 2
    assert result.entropy == 0
    assert result.feedback.warning
    assert result.patterns == ()
    assert len(result.compliance) == 4
    short = analyze_password("short", estimator=FallbackEstimator())
    assert short.score == 0


def test_analysis_is_repeatable():
    est = StubEstimator(score=3, guesses=5e9, patterns=("dictionary", "repeat"))
    assert analyze_password("Tr0ub4dor&3", estimator=est) == analyze_password("Tr0ub4dor&3", estimator=est)


def test_as_dict_uses_camel_case():
    d = analyze_password("Abcdefg1!", estimator=StubEstimator(suggestions=["Add another word"])).as_dict()
    assert d["charCount"] == 9
    assert d["feedback"]["suggestions"] == ["Add another word"]
    assert set(d["crackTimeSeconds"]) == {SLOW_HASHING, FAST_HASHING}
    assert d["compliance"][3] == {
        "name": "ISO 27001",
        "code": "ISO",
        "passed": True,
        "reason": "Requires strong complexity (Upper, Lower, Number/Symbol)",
    }


def test_security_level():
    assert security_level(analyze_password("")) == LEVELS[0]
    result = analyze_password("whatever", estimator=StubEstimator(score=4))
    assert security_level(result).label == "Fortified"


def test_crack_time_percentage():
    assert crack_time_percentage(0) == 0
    assert 0 < crack_time_percentage(3600) < 50
    assert crack_time_percentage(1e20) == 100


def test_real_estimator_flags_common_password():
    result = analyze_password("password")
    assert result.score == 0
    assert "dictionary" in result.patterns
    assert result.compliance[0].passed is False
    assert result.compliance[0].reason == "Too guessable"
