"""
Check combinators.

any_of() merges several heuristics for the same property into one
check: it passes as soon as one heuristic strongly signals the
practice is followed, and otherwise keeps "we could not look" apart
from "we looked and saw nothing".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from repo_scorecard.errors import InsufficientEvidence
from repo_scorecard.models.check_result import CheckResult
from repo_scorecard.checker.registry import CheckFn
from repo_scorecard.checker.results import make_inconclusive_result

if TYPE_CHECKING:
	from repo_scorecard.models.check_request import CheckRequest


def fold_any_of(name: str, results: Iterable[CheckResult]) -> CheckResult:
	"""Fold child results, given in declaration order, into one result.

	Priority: first definitive pass, then first retryable, then first
	definitive fail, then last inconclusive. No results at all is
	inconclusive. The returned result is reported under ``name``.

	A definitive fail is deliberately ranked above inconclusive results:
	a heuristic that looked and saw no review outweighs ones that could
	not decide.
	"""
	first_retry: CheckResult | None = None
	first_fail: CheckResult | None = None
	last_inconclusive: CheckResult | None = None
	for res in results:
		if res.is_pass:
			return res.with_name(name)
		if res.is_retryable:
			if first_retry is None:
				first_retry = res
		elif res.is_inconclusive:
			last_inconclusive = res
		elif first_fail is None:
			first_fail = res

	for candidate in (first_retry, first_fail, last_inconclusive):
		if candidate is not None:
			return candidate.with_name(name)
	return make_inconclusive_result(
	    name, InsufficientEvidence("no heuristics were evaluated"))


def any_of(*checks: CheckFn, name: str) -> CheckFn:
	"""Combine ``checks`` with OR semantics under the check name ``name``.

	Children run sequentially in the given order against the same
	request. Evaluation stops at the first definitive pass; retryable or
	inconclusive children never stop their siblings.
	"""
	children = tuple(checks)

	def _evaluate(req: "CheckRequest"):
		# Lazy: fold_any_of stops pulling at the first pass.
		for check in children:
			yield check(req)

	def combined(req: "CheckRequest") -> CheckResult:
		return fold_any_of(name, _evaluate(req))

	combined.__name__ = f"any_of[{name}]"
	combined.__doc__ = f"Pass if any of {len(children)} heuristics passes."
	return combined


__all__ = ["any_of", "fold_any_of"]
