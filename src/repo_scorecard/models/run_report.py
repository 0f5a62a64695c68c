"""
Run report model.

Collects the results of every check evaluated for one repository.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from .check_result import CheckResult


class RunReport(BaseModel):
	"""Results of one evaluation, in the order the checks were requested."""

	repository: str = Field(description="owner/repo")
	generated_at: datetime = Field(
	    default_factory=lambda: datetime.now(timezone.utc))
	results: list[CheckResult] = Field(default_factory=list)

	def get(self, name: str) -> CheckResult | None:
		for res in self.results:
			if res.name == name:
				return res
		return None

	@property
	def passed(self) -> list[str]:
		"""Names of checks with a definitive pass."""
		return [r.name for r in self.results if r.is_pass]

	@property
	def failed(self) -> list[str]:
		"""Names of checks with a definitive fail."""
		return [r.name for r in self.results if r.is_definitive and not r.passed]

	@property
	def retryable(self) -> list[str]:
		return [r.name for r in self.results if r.is_retryable]

	@property
	def inconclusive(self) -> list[str]:
		return [r.name for r in self.results if r.is_inconclusive]


__all__ = ["RunReport"]
