"""
passgauge.evaluator

Password analysis:
- compute_entropy(guesses): bits against the estimator's attack model, log2(guesses)
- analyze_password(password, estimator=None): runs the estimator and the
  compliance checks and returns an immutable PasswordAnalysis
- security_level(analysis): badge level for display
- crack_time_percentage(seconds): position on a log-scaled crack-time timeline
"""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple, Union

from .compliance import ComplianceCheck, check_compliance
from .estimator import (
    CRACK_SCENARIOS,
    FAST_HASHING,
    SLOW_HASHING,
    EstimatorResult,
    Feedback,
    default_estimator,
)

logger = logging.getLogger(__name__)

COLORS = {
    "WEAK": "red",
    "FAIR": "dark_orange",
    "GOOD": "yellow",
    "STRONG": "cyan",
    "VERY_STRONG": "green",
}

EMPTY_LABEL = "EMPTY"
EMPTY_COLOR = "grey50"

# score -> (label, color)
TIERS: Tuple[Tuple[str, str], ...] = (
    ("Very Weak", COLORS["WEAK"]),
    ("Weak", COLORS["WEAK"]),
    ("Fair", COLORS["FAIR"]),
    ("Good", COLORS["GOOD"]),
    ("Strong", COLORS["STRONG"]),
)

# overrides the score tier
EXCELLENT_ENTROPY = 100
EXCELLENT_TIER = ("Excellent", COLORS["VERY_STRONG"])

# reported for guess counts past float range
ENTROPY_CEILING = 1024

# timeline tops out around 10^15 seconds
CRACK_TIMELINE_MAX_LOG10 = 15


@dataclass(frozen=True)
class SecurityLevel:
    label: str
    color: str
    description: str


LEVELS: Tuple[SecurityLevel, ...] = (
    SecurityLevel("Script Kiddie Target", COLORS["WEAK"], "Widely available in breach databases."),
    SecurityLevel("Vulnerable", COLORS["FAIR"], "Susceptible to basic dictionary attacks."),
    SecurityLevel("Moderate", COLORS["GOOD"], "Reasonable for low-risk accounts."),
    SecurityLevel("Secure", COLORS["STRONG"], "Standard protection for sensitive data."),
    SecurityLevel("Fortified", COLORS["VERY_STRONG"], "Military-grade entropy detected."),
)


@dataclass(frozen=True)
class PasswordAnalysis:
    score: int
    entropy: int
    crack_time_seconds: Dict[str, float]
    crack_times_display: Dict[str, str]
    feedback: Feedback
    patterns: Tuple[str, ...]
    compliance: Tuple[ComplianceCheck, ...]
    char_count: int
    label: str
    color: str

    def as_dict(self) -> Dict[str, Any]:
        """JSON-ready view with camelCase keys, as served by the API."""
        return {
            "score": self.score,
            "entropy": self.entropy,
            "crackTimeSeconds": dict(self.crack_time_seconds),
            "crackTimesDisplay": dict(self.crack_times_display),
            "feedback": {
                "warning": self.feedback.warning,
                "suggestions": list(self.feedback.suggestions),
            },
            "patterns": list(self.patterns),
            "compliance": [
                {"name": c.name, "code": c.code, "passed": c.passed, "reason": c.reason}
                for c in self.compliance
            ],
            "charCount": self.char_count,
            "label": self.label,
            "color": self.color,
        }


def empty_analysis() -> PasswordAnalysis:
    """Sentinel record for the empty password; nothing is estimated or checked."""
    return PasswordAnalysis(
        score=0,
        entropy=0,
        crack_time_seconds={SLOW_HASHING: 0, FAST_HASHING: 0},
        crack_times_display={k: "-" for k in CRACK_SCENARIOS},
        feedback=Feedback(),
        patterns=(),
        compliance=(),
        char_count=0,
        label=EMPTY_LABEL,
        color=EMPTY_COLOR,
    )


def _log2(guesses: Union[float, int, Decimal]) -> float:
    if isinstance(guesses, Decimal):
        if guesses.is_infinite():
            return math.inf
        return float(guesses.log10()) * math.log2(10)
    # math.log2 is exact enough for ints beyond float range
    return math.log2(guesses)


def compute_entropy(guesses: Union[float, int, Decimal]) -> int:
    """
    round(log2(guesses)), half rounding up. Zero, negative, NaN or unusable
    guesses and negative results clamp to 0; infinite guesses get
    ENTROPY_CEILING.
    """
    if isinstance(guesses, bool) or not isinstance(guesses, (int, float, Decimal)):
        return 0
    if isinstance(guesses, Decimal) and guesses.is_nan():
        return 0
    if guesses != guesses or not guesses > 0:  # NaN or non-positive
        return 0
    bits = _log2(guesses)
    if math.isinf(bits):
        return ENTROPY_CEILING
    return min(max(int(math.floor(bits + 0.5)), 0), ENTROPY_CEILING)


def tier_for(score: int, entropy: int) -> Tuple[str, str]:
    """Label and color for a score, with the high-entropy override."""
    if entropy > EXCELLENT_ENTROPY:
        return EXCELLENT_TIER
    if 0 <= score < len(TIERS):
        return TIERS[score]
    logger.debug("score %r outside tier table", score)
    return TIERS[1]


def analyze_password(password: str, estimator: Optional[Any] = None) -> PasswordAnalysis:
    """
    Analyze one password. ``estimator`` is anything with
    ``estimate(password) -> EstimatorResult``; defaults to zxcvbn.
    """
    if not password:
        return empty_analysis()

    est = estimator if estimator is not None else default_estimator()
    result: EstimatorResult = est.estimate(password)

    entropy = compute_entropy(result.guesses)
    compliance = tuple(check_compliance(password, result))
    label, color = tier_for(result.score, entropy)

    return PasswordAnalysis(
        score=result.score,
        entropy=entropy,
        crack_time_seconds={
            SLOW_HASHING: result.crack_times_seconds.get(SLOW_HASHING, 0.0),
            FAST_HASHING: result.crack_times_seconds.get(FAST_HASHING, 0.0),
        },
        crack_times_display=dict(result.crack_times_display),
        feedback=result.feedback,
        patterns=result.patterns,
        compliance=compliance,
        char_count=len(password),
        label=label,
        color=color,
    )


def security_level(analysis: PasswordAnalysis) -> SecurityLevel:
    if analysis.char_count == 0:
        return LEVELS[0]
    return LEVELS[min(max(analysis.score, 0), len(LEVELS) - 1)]


def crack_time_percentage(seconds: float) -> float:
    """0-100 position of ``seconds`` on a log10 timeline capped at 10^15 s."""
    log_val = max(0.0, math.log10(max(float(seconds), 0.0) + 1))
    return min(100.0, (log_val / CRACK_TIMELINE_MAX_LOG10) * 100)
