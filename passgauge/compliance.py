"""
passgauge.compliance

Checks a password against four published password policies. Each policy looks
only at the password length, the estimator score and the character-class
complexity; every policy is evaluated on every call.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Tuple

from .estimator import EstimatorResult

_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(r"[^A-Za-z0-9]")


@dataclass(frozen=True)
class ComplianceCheck:
    name: str
    code: str
    passed: bool
    reason: str


@dataclass(frozen=True)
class Policy:
    name: str
    code: str
    # (password length, estimator score, complexity) -> (passed, reason)
    evaluate: Callable[[int, int, int], Tuple[bool, str]]


def complexity_count(password: str) -> int:
    """
    0-3 points: mixed case counts once, then one each for a digit and for
    anything outside [A-Za-z0-9].
    """
    has_mixed = bool(_LOWER.search(password)) and bool(_UPPER.search(password))
    has_digit = bool(_DIGIT.search(password))
    has_special = bool(_SPECIAL.search(password))
    return int(has_mixed) + int(has_digit) + int(has_special)


def _nist(length: int, score: int, complexity: int) -> Tuple[bool, str]:
    if length < 8:
        reason = "Min length 8 required"
    elif score < 2:
        reason = "Too guessable"
    else:
        reason = "Compliant"
    return length >= 8 and score >= 2, reason


def _owasp(length: int, score: int, complexity: int) -> Tuple[bool, str]:
    if length < 10:
        reason = "Min length 10 required"
    elif score < 3:
        reason = "Weak against dictionary attacks"
    else:
        reason = "Compliant"
    return length >= 10 and score >= 3, reason


def _enisa(length: int, score: int, complexity: int) -> Tuple[bool, str]:
    passed = length >= 12 or (length >= 8 and complexity >= 2)
    return passed, "Requires length 12+ or 8+ with complexity"


def _iso(length: int, score: int, complexity: int) -> Tuple[bool, str]:
    return length >= 8 and complexity >= 3, "Requires strong complexity (Upper, Lower, Number/Symbol)"


# report order is fixed
POLICIES: Tuple[Policy, ...] = (
    Policy("NIST SP 800-63B", "NIST", _nist),
    Policy("OWASP Top 10", "OWASP", _owasp),
    Policy("ENISA Guidelines", "ENISA", _enisa),
    Policy("ISO 27001", "ISO", _iso),
)


def check_compliance(password: str, result: EstimatorResult) -> List[ComplianceCheck]:
    """Evaluate every policy in POLICIES against password and the estimator result."""
    length = len(password)
    complexity = complexity_count(password)
    checks: List[ComplianceCheck] = []
    for policy in POLICIES:
        passed, reason = policy.evaluate(length, result.score, complexity)
        checks.append(ComplianceCheck(name=policy.name, code=policy.code, passed=passed, reason=reason))
    return checks
