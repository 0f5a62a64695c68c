"""
Run parameters model.

Defines validated run parameters for CLI invocation and the runner.
"""

from __future__ import annotations

import re
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from pydantic_core.core_schema import ValidationInfo

ORG_REPO_RE = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")


class RunParams(BaseModel):
	"""Validated run parameters for CLI/runner.

	Optional fields are CLI overrides; None keeps the environment
	configuration.
	"""

	org_repo: str = Field(description="owner/repo")
	checks: Optional[list[str]] = Field(
	    default=None,
	    description="Check names to run (default: all registered)",
	)
	timeout: Optional[int] = Field(default=None,
	                               description="Evaluation timeout seconds")
	threshold: Optional[float] = Field(default=None,
	                                   description="Review threshold override")
	output_json: bool = Field(default=False,
	                          description="Emit JSON instead of a table")

	@field_validator('org_repo')
	@classmethod
	def validate_org_repo(cls, v: str) -> str:
		if not ORG_REPO_RE.match(v):
			raise ValueError(
			    "org_repo must be owner/repo with safe characters")
		return v

	@field_validator('checks')
	@classmethod
	def validate_checks(cls, v: Optional[list[str]]) -> Optional[list[str]]:
		if not v:
			return None
		names = [n.strip() for n in v if n.strip()]
		return names or None

	@field_validator('timeout')
	@classmethod
	def validate_positive(cls, v: Optional[int],
	                      info: ValidationInfo) -> Optional[int]:
		if v is None:
			return v
		if v <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	@field_validator('threshold')
	@classmethod
	def validate_threshold(cls, v: Optional[float]) -> Optional[float]:
		if v is None:
			return v
		if not 0.0 < v <= 1.0:
			raise ValueError("threshold must be in (0, 1]")
		return v

	@property
	def owner(self) -> str:
		return self.org_repo.split('/')[0]

	@property
	def repo(self) -> str:
		return self.org_repo.split('/')[1]


__all__ = ["RunParams"]
