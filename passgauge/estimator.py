"""
passgauge.estimator

Adapter around the zxcvbn guess estimator.

- ZxcvbnEstimator: runs zxcvbn and normalizes its raw dict into an EstimatorResult
- FallbackEstimator: degraded, length-only result used when zxcvbn cannot run
- default_estimator(): shared ZxcvbnEstimator configured from settings

Anything with an ``estimate(password) -> EstimatorResult`` method can be handed
to the evaluator in place of these.
"""

import logging
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple, Union

from zxcvbn import zxcvbn

from .config import load_config

logger = logging.getLogger(__name__)

SLOW_HASHING = "offline_slow_hashing_1e4_per_second"
FAST_HASHING = "offline_fast_hashing_1e10_per_second"

CRACK_SCENARIOS = (
    "online_throttling_100_per_hour",
    "online_no_throttling_10_per_second",
    SLOW_HASHING,
    FAST_HASHING,
)

FALLBACK_WARNING = "Strength estimator not available"

# zxcvbn refuses (or crawls through) very long inputs
DEFAULT_MAX_LENGTH = 72


@dataclass(frozen=True)
class Feedback:
    warning: str = ""
    suggestions: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PatternMatch:
    """One match from the estimator's best-guess decomposition."""

    pattern: str
    token: str = ""


@dataclass(frozen=True)
class EstimatorResult:
    score: int
    # Decimal or int when the count is too large for a float
    guesses: Union[float, int, Decimal]
    feedback: Feedback = field(default_factory=Feedback)
    crack_times_display: Dict[str, str] = field(default_factory=dict)
    crack_times_seconds: Dict[str, float] = field(default_factory=dict)
    sequence: Tuple[PatternMatch, ...] = ()

    @property
    def patterns(self) -> Tuple[str, ...]:
        return tuple(m.pattern for m in self.sequence)


class FallbackEstimator:
    """
    Deterministic stand-in used when zxcvbn is unusable.

    Only the length is looked at: anything longer than 8 characters gets a
    score of 2, the rest 0. Crack times are unknown ("?" / 0).
    """

    def estimate(self, password: str) -> EstimatorResult:
        return EstimatorResult(
            score=2 if len(password) > 8 else 0,
            guesses=0.0,
            feedback=Feedback(warning=FALLBACK_WARNING, suggestions=()),
            crack_times_display={k: "?" for k in CRACK_SCENARIOS},
            crack_times_seconds={k: 0.0 for k in CRACK_SCENARIOS},
            sequence=(),
        )


def _to_float(value: Any) -> float:
    # zxcvbn reports guesses and seconds as Decimal
    try:
        return float(value)
    except OverflowError:
        return math.inf
    except (TypeError, ValueError):
        return 0.0


def _to_guesses(value: Any) -> Union[float, int, Decimal]:
    as_float = _to_float(value)
    if math.isinf(as_float) and isinstance(value, (int, Decimal)):
        return value
    return as_float


def normalize_result(raw: Dict[str, Any]) -> EstimatorResult:
    """Convert a raw zxcvbn result dict into an EstimatorResult."""
    fb = raw.get("feedback") or {}
    display = raw.get("crack_times_display") or {}
    seconds = raw.get("crack_times_seconds") or {}
    sequence = tuple(
        PatternMatch(pattern=str(m.get("pattern", "")), token=str(m.get("token", "")))
        for m in raw.get("sequence") or []
    )
    return EstimatorResult(
        score=int(raw.get("score", 0)),
        guesses=_to_guesses(raw.get("guesses", 0)),
        feedback=Feedback(
            warning=fb.get("warning") or "",
            suggestions=tuple(fb.get("suggestions") or ()),
        ),
        crack_times_display={k: str(display.get(k, "?")) for k in CRACK_SCENARIOS},
        crack_times_seconds={k: _to_float(seconds.get(k, 0)) for k in CRACK_SCENARIOS},
        sequence=sequence,
    )


class ZxcvbnEstimator:
    """Runs zxcvbn locally; degrades to FallbackEstimator if the call fails."""

    def __init__(self, max_length: int = DEFAULT_MAX_LENGTH, fallback: Optional[FallbackEstimator] = None):
        if max_length <= 0:
            raise ValueError("max_length must be > 0")
        self.max_length = max_length
        self.fallback = fallback or FallbackEstimator()

    def _run(self, password: str) -> Dict[str, Any]:
        return zxcvbn(password[: self.max_length])

    def estimate(self, password: str) -> EstimatorResult:
        try:
            raw = self._run(password)
        except Exception as e:
            logger.warning("zxcvbn failed (%s); using degraded length-only estimate", e)
            return self.fallback.estimate(password)
        return normalize_result(raw)


_default: Optional[ZxcvbnEstimator] = None


def default_estimator() -> ZxcvbnEstimator:
    global _default
    if _default is None:
        cfg = load_config()
        _default = ZxcvbnEstimator(max_length=int(cfg.get("estimator_max_length", DEFAULT_MAX_LENGTH)))
        logger.debug("created default estimator (max_length=%d)", _default.max_length)
    return _default
