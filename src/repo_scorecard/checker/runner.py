"""
Check runner.

Resolves named checks in the registry and evaluates them for one
repository, returning a CheckResult per check in a RunReport.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Iterable

from repo_scorecard.errors import EvidenceError, UnknownCheckError
from repo_scorecard.models.check_result import CheckResult
from repo_scorecard.models.run_report import RunReport
from repo_scorecard.checker.registry import CheckRegistry
from repo_scorecard.checker.results import make_retry_result
from repo_scorecard.utils.logging import get_logger

if TYPE_CHECKING:
	from repo_scorecard.models.check_request import CheckRequest

logger = get_logger(__name__)


def _default_registry() -> CheckRegistry:
	from repo_scorecard.checks import init_checks

	return init_checks()


def _resolve_all(reg: CheckRegistry, names: list[str]) -> None:
	unknown = [n for n in names if reg.resolve(n) is None]
	if unknown:
		raise UnknownCheckError(f"unknown check(s): {', '.join(unknown)}")


def run_check(
    name: str,
    request: "CheckRequest",
    *,
    checks: CheckRegistry | None = None,
) -> CheckResult:
	"""Evaluate the check registered under ``name``.

	Raises:
		UnknownCheckError: if ``name`` is not registered.
	"""
	reg = checks if checks is not None else _default_registry()
	fn = reg.resolve(name)
	if fn is None:
		raise UnknownCheckError(f"unknown check: {name}")

	logger.debug("running check %s for %s", name, request.full_name)
	try:
		result = fn(request)
	except EvidenceError as exc:
		logger.warning("check %s: unclassified fetch error: %s", name, exc)
		result = make_retry_result(name, exc)

	if result.name != name:
		logger.warning("check %s returned result named %s; renaming", name,
		               result.name)
		result = result.with_name(name)
	logger.info(
	    "check %s for %s: passed=%s confidence=%d error=%s",
	    name,
	    request.full_name,
	    result.passed,
	    result.confidence,
	    result.error.value,
	)
	return result


def run_checks(
    request: "CheckRequest",
    names: Iterable[str] | None = None,
    *,
    checks: CheckRegistry | None = None,
    max_workers: int = 1,
) -> RunReport:
	"""Evaluate several checks for one repository.

	Parameters:
		request: The evaluation request, shared read-only by all checks.
		names: Check names to run; None runs every registered check.
		checks: Registry to resolve names in (default: built-in checks).
		max_workers: Checks evaluated concurrently. Result order always
			follows ``names``.

	Raises:
		UnknownCheckError: before any check runs, if a name is unknown.
	"""
	reg = checks if checks is not None else _default_registry()
	selected = list(names) if names is not None else reg.names()
	_resolve_all(reg, selected)

	def _run(name: str) -> CheckResult:
		return run_check(name, request, checks=reg)

	if max_workers <= 1 or len(selected) <= 1:
		results = [_run(n) for n in selected]
	else:
		with ThreadPoolExecutor(max_workers=max_workers) as pool:
			results = list(pool.map(_run, selected))
	return RunReport(repository=request.full_name, results=results)


__all__ = ["run_check", "run_checks"]
