"""Check evaluation framework.

Key modules:
    - results: CheckResult constructors (pass, fail, retry, inconclusive)
    - scoring: proportional scoring rule
    - registry: process-wide name to check mapping
    - combinators: any_of() for OR-style heuristic merging
    - runner: run_check() / run_checks()
"""

from repo_scorecard.checker.results import (
    make_pass_result,
    make_fail_result,
    make_retry_result,
    make_inconclusive_result,
)
from repo_scorecard.checker.scoring import (
    PASS_CONFIDENCE,
    proportional_confidence,
    make_proportional_result,
)
from repo_scorecard.checker.registry import (
    CheckFn,
    CheckRegistry,
    registry,
    register_check,
)
from repo_scorecard.checker.combinators import any_of, fold_any_of
from repo_scorecard.checker.runner import run_check, run_checks

__all__ = [
    # results
    "make_pass_result",
    "make_fail_result",
    "make_retry_result",
    "make_inconclusive_result",
    # scoring
    "PASS_CONFIDENCE",
    "proportional_confidence",
    "make_proportional_result",
    # registry
    "CheckFn",
    "CheckRegistry",
    "registry",
    "register_check",
    # combinators
    "any_of",
    "fold_any_of",
    # runner
    "run_check",
    "run_checks",
]
