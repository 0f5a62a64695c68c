"""Built-in checks.

Registration is explicit: init_checks() registers every built-in check
with the process-wide registry and freezes it. Call it once at startup,
before evaluating anything.
"""

from __future__ import annotations

from repo_scorecard.checker.registry import CheckRegistry, registry
from repo_scorecard.checks.code_review import CHECK_CODE_REVIEW, does_code_review

BUILTIN_CHECKS = (
    (CHECK_CODE_REVIEW, does_code_review),
)


def register_builtin_checks(target: CheckRegistry) -> CheckRegistry:
	"""Register every built-in check with ``target`` and return it."""
	for name, fn in BUILTIN_CHECKS:
		target.register(name, fn)
	return target


def init_checks() -> CheckRegistry:
	"""Initialize and freeze the process-wide registry (idempotent)."""
	if not registry.frozen:
		register_builtin_checks(registry)
		registry.freeze()
	return registry


__all__ = [
    "BUILTIN_CHECKS",
    "CHECK_CODE_REVIEW",
    "register_builtin_checks",
    "init_checks",
]
