"""
Result constructors.

Every check builds its CheckResult through one of these helpers so that
error classification stays uniform: retryable for failed fetches,
inconclusive for missing or sparse evidence.
"""

from __future__ import annotations

from repo_scorecard.models.check_result import (
    CheckResult,
    ErrorKind,
    MIN_CONFIDENCE,
)
from repo_scorecard.utils.logging import get_logger

logger = get_logger(__name__)


def make_pass_result(name: str, confidence: int) -> CheckResult:
	"""Build a definitive positive result."""
	return CheckResult(name=name, passed=True, confidence=confidence)


def make_fail_result(name: str, confidence: int) -> CheckResult:
	"""Build a definitive negative result."""
	return CheckResult(name=name, passed=False, confidence=confidence)


def make_retry_result(name: str, cause: BaseException) -> CheckResult:
	"""Build a result for a failed evidence fetch.

	The same check may be safely re-run. No verdict is asserted.
	"""
	logger.debug("%s: retryable: %s", name, cause)
	return CheckResult(
	    name=name,
	    passed=False,
	    confidence=MIN_CONFIDENCE,
	    error=ErrorKind.RETRYABLE,
	    message=str(cause) or type(cause).__name__,
	    cause=cause,
	)


def make_inconclusive_result(
    name: str,
    cause: BaseException | None = None,
) -> CheckResult:
	"""Build a result for evidence that was fetched but cannot decide.

	Re-running will not help; callers treat it as "no opinion".
	"""
	logger.debug("%s: inconclusive: %s", name, cause)
	return CheckResult(
	    name=name,
	    passed=False,
	    confidence=MIN_CONFIDENCE,
	    error=ErrorKind.INCONCLUSIVE,
	    message=str(cause) if cause is not None else None,
	    cause=cause,
	)


__all__ = [
    "make_pass_result",
    "make_fail_result",
    "make_retry_result",
    "make_inconclusive_result",
]
