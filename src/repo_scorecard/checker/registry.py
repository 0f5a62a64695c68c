"""
Check registry.

Maps check names to check functions. The process-wide registry is
populated once during a single-threaded initialization phase and frozen
before any evaluation starts; after that it is read-only and safe to
read from several threads without locking.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterator

from repo_scorecard.errors import DuplicateCheckError, RegistryFrozenError

if TYPE_CHECKING:
	from repo_scorecard.models.check_request import CheckRequest
	from repo_scorecard.models.check_result import CheckResult

CheckFn = Callable[["CheckRequest"], "CheckResult"]


class CheckRegistry:
	"""Name to check-function mapping with startup-only writes."""

	def __init__(self):
		self._checks: dict[str, CheckFn] = {}
		self._frozen = False

	def register(self, name: str, fn: CheckFn) -> None:
		"""Register ``fn`` under ``name``.

		Raises:
			DuplicateCheckError: if ``name`` is already registered.
			RegistryFrozenError: if initialization already completed.
		"""
		if self._frozen:
			raise RegistryFrozenError(
			    f"cannot register {name!r}: registry is frozen")
		if not name:
			raise ValueError("check name must be non-empty")
		if name in self._checks:
			raise DuplicateCheckError(f"duplicate check registered: {name}")
		self._checks[name] = fn

	def resolve(self, name: str) -> CheckFn | None:
		"""Return the check registered under ``name``, or None."""
		return self._checks.get(name)

	def names(self) -> list[str]:
		"""Return registered names in registration order."""
		return list(self._checks)

	def freeze(self) -> None:
		self._frozen = True

	@property
	def frozen(self) -> bool:
		return self._frozen

	def __contains__(self, name: object) -> bool:
		return name in self._checks

	def __len__(self) -> int:
		return len(self._checks)

	def __iter__(self) -> Iterator[str]:
		return iter(self.names())


registry = CheckRegistry()


def register_check(name: str, fn: CheckFn) -> CheckFn:
	"""Register ``fn`` with the process-wide registry and return it."""
	registry.register(name, fn)
	return fn


__all__ = ["CheckFn", "CheckRegistry", "registry", "register_check"]
