"""
Check result model.

Defines the CheckResult value produced exactly once per check
invocation, and the ErrorKind classification it carries.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Confidence bounds. MAX_CONFIDENCE denotes certainty (an explicit
# configuration flag was observed).
MIN_CONFIDENCE = 0
MAX_CONFIDENCE = 10


class ErrorKind(str, Enum):
	"""How far a result can be trusted."""

	NONE = "none"
	RETRYABLE = "retryable"
	INCONCLUSIVE = "inconclusive"


class CheckResult(BaseModel):
	"""Outcome of a single named check.

	``passed`` and ``confidence`` are only meaningful when ``error`` is
	``ErrorKind.NONE``; callers must branch on the classification first.
	"""

	model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

	name: str = Field(description="Registered check name")
	passed: bool = Field(default=False, description="Pass verdict")
	confidence: int = Field(
	    default=MIN_CONFIDENCE,
	    ge=MIN_CONFIDENCE,
	    le=MAX_CONFIDENCE,
	    description="Confidence in the verdict, 0-10",
	)
	error: ErrorKind = Field(
	    default=ErrorKind.NONE,
	    description="Error classification",
	)
	message: str | None = Field(
	    default=None,
	    description="Human-readable cause for non-definitive results",
	)
	cause: BaseException | None = Field(
	    default=None,
	    exclude=True,
	    repr=False,
	    description="Original exception, kept for callers",
	)

	@property
	def is_definitive(self) -> bool:
		return self.error is ErrorKind.NONE

	@property
	def is_pass(self) -> bool:
		"""Return True for a definitive positive verdict."""
		return self.is_definitive and self.passed

	@property
	def is_retryable(self) -> bool:
		return self.error is ErrorKind.RETRYABLE

	@property
	def is_inconclusive(self) -> bool:
		return self.error is ErrorKind.INCONCLUSIVE

	def with_name(self, name: str) -> "CheckResult":
		"""Return a copy of this result reported under ``name``."""
		if name == self.name:
			return self
		return self.model_copy(update={"name": name})


__all__ = ["CheckResult", "ErrorKind", "MIN_CONFIDENCE", "MAX_CONFIDENCE"]
