"""
Proportional scoring rule.

Turns "k of n sampled artifacts show the desired property" into a
pass/fail verdict and a bounded confidence.

Confidence mapping (monotonic in the observed ratio):

  ratio < threshold:   floor(ratio / threshold * (PASS_CONFIDENCE - 1))
  ratio >= threshold:  PASS_CONFIDENCE
                       + floor((ratio - threshold) / (1 - threshold)
                               * (MAX_CONFIDENCE - PASS_CONFIDENCE))

A ratio of zero maps to MIN_CONFIDENCE, any passing ratio maps to at
least PASS_CONFIDENCE, and a ratio of one maps to MAX_CONFIDENCE.
"""

from __future__ import annotations

import math

from repo_scorecard.models.check_request import DEFAULT_THRESHOLD
from repo_scorecard.models.check_result import (
    CheckResult,
    MAX_CONFIDENCE,
    MIN_CONFIDENCE,
)

# Lowest confidence a passing ratio can map to.
PASS_CONFIDENCE = 5


def proportional_confidence(ratio: float, threshold: float) -> int:
	"""Map an observed ratio to a confidence in [MIN, MAX]."""
	if ratio >= threshold:
		if threshold >= 1.0:
			return MAX_CONFIDENCE
		span = MAX_CONFIDENCE - PASS_CONFIDENCE
		scaled = (ratio - threshold) / (1.0 - threshold) * span
		return min(MAX_CONFIDENCE, PASS_CONFIDENCE + math.floor(scaled))
	scaled = ratio / threshold * (PASS_CONFIDENCE - 1)
	return max(MIN_CONFIDENCE, min(PASS_CONFIDENCE - 1, math.floor(scaled)))


def make_proportional_result(
    name: str,
    numerator: int,
    denominator: int,
    threshold: float = DEFAULT_THRESHOLD,
) -> CheckResult:
	"""Score ``numerator`` positive observations out of ``denominator``.

	Passes iff ``numerator / denominator >= threshold``.

	Raises:
		ValueError: if ``denominator`` is not positive, ``numerator`` is
			outside ``[0, denominator]`` or ``threshold`` is outside
			``(0, 1]``. Callers return an inconclusive result for an
			empty population instead of calling this.
	"""
	if denominator <= 0:
		raise ValueError("denominator must be > 0")
	if not 0 <= numerator <= denominator:
		raise ValueError("numerator must be within [0, denominator]")
	if not 0.0 < threshold <= 1.0:
		raise ValueError("threshold must be in (0, 1]")
	ratio = numerator / denominator
	return CheckResult(
	    name=name,
	    passed=ratio >= threshold,
	    confidence=proportional_confidence(ratio, threshold),
	    message=f"{numerator}/{denominator} observations (threshold {threshold:g})",
	)


__all__ = [
    "PASS_CONFIDENCE",
    "proportional_confidence",
    "make_proportional_result",
]
